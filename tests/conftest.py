import pytest

ENV_VARS = (
    "STREAM_XML_INDENT_WIDTH",
    "STREAM_XML_NEWLINE",
    "STREAM_XML_VERBOSITY",
)


@pytest.fixture(autouse=True)
def _clean_writer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep writer configuration deterministic.

    ConfigLoader reads STREAM_XML_* variables from the environment; a
    developer shell exporting them would otherwise change rendered output.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
