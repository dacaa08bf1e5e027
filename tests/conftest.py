import pytest
from click.testing import CliRunner


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Click runner for invoking the spacer command."""
    return CliRunner()


@pytest.fixture()
def verbatim_source() -> str:
    """C# snippet whose tab-indented verbatim string must survive conversion."""
    return 'class A {\n\tstring s = @"\n\tkeep ""quoted""\n";\n}\n'
