import pytest

from optcompose import Application
from optcompose.modules import BasicOptions
from optcompose.signals import FlowSignal, HelpSignal, VersionSignal


def test_help_signal_carries_usage():
    app = Application(program="tool", usage="%c %o", modules=[BasicOptions()])
    with pytest.raises(HelpSignal) as exc_info:
        app.run(["-h"])
    assert exc_info.value.text.startswith("tool [options]")
    assert "display a version" in exc_info.value.text


@pytest.mark.parametrize("flag", ["--version", "-v", "-version"])
def test_version_signal(flag):
    app = Application(program="tool", version="2.0", modules=[BasicOptions()])
    with pytest.raises(VersionSignal) as exc_info:
        app.run([flag])
    assert exc_info.value.text == "tool 2.0"


def test_version_without_version_string():
    app = Application(program="tool", modules=[BasicOptions()])
    with pytest.raises(VersionSignal) as exc_info:
        app.run(["-v"])
    assert exc_info.value.text == "tool unknown version"


def test_help_wins_over_version():
    app = Application(program="tool", modules=[BasicOptions()])
    with pytest.raises(HelpSignal):
        app.run(["-v", "-h"])


def test_signals_are_not_exceptions():
    assert issubclass(HelpSignal, FlowSignal)
    assert not issubclass(HelpSignal, Exception)


def test_nothing_given_passes():
    app = Application(program="tool", modules=[BasicOptions()])
    opts, args = app.run(["file"])
    assert opts["h"] is None
    assert args == ("file",)
