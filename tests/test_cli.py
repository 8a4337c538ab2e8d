# pylint: disable=missing-module-docstring
# pylint: disable=missing-function-docstring

# third-party
import pytest
from click.testing import CliRunner

# local
from importorder.cli import main, read_lines


# ---------------------------------------------------------------------------- #

@pytest.fixture
def files(tmp_path):
    contents = {'std':     '"fmt"\n"os"\n',
                'general': '"github.com/pkg/errors"\n\n',
                'company': '"gitlab.org/company/lib"\n',
                'project': '"project/internal/util"\n'}
    paths = {}
    for name, text in contents.items():
        paths[name] = path = tmp_path / f'{name}.txt'
        path.write_text(text)
    return paths


def _args(files):
    args = []
    for name, path in files.items():
        args.extend((f'--{name}', str(path)))
    return args


# ---------------------------------------------------------------------------- #

def test_read_lines(files):
    assert read_lines(files['general']) == ['"github.com/pkg/errors"']
    assert read_lines(None) == []


def test_main_default_order(files):
    result = CliRunner().invoke(main, _args(files))
    assert result.exit_code == 0
    assert result.output == ('"fmt"\n"os"\n'
                             '\n'
                             '"github.com/pkg/errors"\n'
                             '\n'
                             '"gitlab.org/company/lib"\n'
                             '"project/internal/util"\n')


def test_main_order_option(files):
    result = CliRunner().invoke(
        main, ['--order', 'project,std,company,general', *_args(files)]
    )
    assert result.exit_code == 0
    assert result.output.splitlines() == ['"project/internal/util"',
                                          '',
                                          '"fmt"',
                                          '"os"',
                                          '',
                                          '"gitlab.org/company/lib"',
                                          '',
                                          '"github.com/pkg/errors"']


def test_main_missing_groups(files):
    result = CliRunner().invoke(main, ['--company', str(files['company']),
                                       '--project', str(files['project'])])
    assert result.exit_code == 0
    assert result.output == ('\n\n'
                             '"gitlab.org/company/lib"\n'
                             '"project/internal/util"\n')


def test_main_config_file(files, tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('order: company,project,general,std\nno_separator: []\n')
    result = CliRunner().invoke(main, ['-c', str(path), *_args(files)])
    assert result.exit_code == 0
    assert result.output.splitlines() == ['"gitlab.org/company/lib"',
                                          '',
                                          '"project/internal/util"',
                                          '',
                                          '"github.com/pkg/errors"',
                                          '',
                                          '"fmt"',
                                          '"os"']


@pytest.mark.parametrize(
    'order, message',
    [('std,general,company', 'std,general,company,project'),
     ('std,general,company,vendor', '"vendor"')]
)
def test_main_bad_order(files, order, message):
    result = CliRunner().invoke(main, ['--order', order, *_args(files)])
    assert result.exit_code == 2
    assert message in result.output


def test_main_verbose(files):
    result = CliRunner().invoke(main, ['-v', *_args(files)])
    assert result.exit_code == 0
    assert 'Ordering imports: std, general, company, project.' in result.output


def test_main_bad_no_separator_config(files, tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('no_separator: [company, vendor]\n')
    result = CliRunner().invoke(main, ['-c', str(path), *_args(files)])
    assert result.exit_code == 2
    assert '"vendor"' in result.output
    assert "'--config'" in result.output
    assert "'--order'" not in result.output
