import io

import pytest

from scaffold_bridge.directives import DirectiveWriter


def test_rerun_if_changed_uses_path_verbatim() -> None:
    stream = io.StringIO()
    writer = DirectiveWriter(stream=stream)

    line = writer.rerun_if_changed("src/example.udl")

    assert line == "cargo:rerun-if-changed=src/example.udl"
    assert stream.getvalue() == "cargo:rerun-if-changed=src/example.udl\n"
    assert writer.emitted == [line]


def test_default_writer_prints_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    DirectiveWriter().rerun_if_changed("example.idl")
    assert capsys.readouterr().out == "cargo:rerun-if-changed=example.idl\n"


def test_warning_is_kept_on_one_line() -> None:
    stream = io.StringIO()
    writer = DirectiveWriter(stream=stream)

    writer.warning("version mismatch\nplease reinstall")

    assert stream.getvalue() == "cargo:warning=version mismatch please reinstall\n"
