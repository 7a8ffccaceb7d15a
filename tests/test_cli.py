import io
import json
from pathlib import Path

import pytest

from chromagrad import __version__
from chromagrad.cli import EXIT_FAILURE, EXIT_OK, build_parser, main
from chromagrad.gradients import preset_names

DATA = Path(__file__).parent / "data"


def run(*argv):
    stdout, stderr = io.StringIO(), io.StringIO()
    status = main([str(a) for a in argv], stdout=stdout, stderr=stderr)
    return status, stdout.getvalue(), stderr.getvalue()


def test_no_arguments_prints_help():
    status, out, err = run()
    assert status == EXIT_FAILURE
    assert out == ""
    assert err.startswith("usage: gradient")


def test_nothing_requested_prints_help():
    status, _, err = run("--verbose")
    assert status == EXIT_FAILURE
    assert "usage:" in err


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(["--version"])
    assert info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_list_presets():
    status, out, _ = run("--list-presets")
    assert status == EXIT_OK
    assert out.splitlines() == preset_names()


def test_preset_take():
    status, out, err = run("-p", "rainbow", "-t", "3")
    assert status == EXIT_OK
    assert err == ""
    lines = out.splitlines()
    assert len(lines) == 3
    assert lines[0] == "#6e40aa"


def test_preset_array():
    status, out, _ = run("-p", "spectral", "-s", "0", "1", "-a")
    assert status == EXIT_OK
    assert json.loads(out) == ["#9e0142", "#5e4fa2"]


def test_unknown_preset():
    status, out, err = run("-p", "nope")
    assert status == EXIT_FAILURE
    assert out == ""
    assert "invalid preset gradient name 'nope'" in err
    assert "--list-presets" in err


def test_block_output_is_empty_off_a_terminal():
    status, out, _ = run("-p", "viridis")
    assert status == EXIT_OK
    assert out == ""


def test_custom_gradient():
    status, out, _ = run("-c", "red", "blue", "-s", "0", "1", "-a")
    assert status == EXIT_OK
    assert json.loads(out) == ["#ff0000", "#0000ff"]


def test_custom_formats():
    status, out, _ = run("-c", "red", "blue", "-t", "2", "-o", "rgb255", "-m", "rgb", "-i", "linear")
    assert status == EXIT_OK
    assert out == "rgb(255,0,0)\nrgb(0,0,255)\n"


def test_custom_positions():
    status, out, _ = run("-c", "red", "lime", "blue", "-P", "0", "10", "-s", "5", "-a", "-m", "rgb", "-i", "linear")
    assert status == EXIT_OK
    assert json.loads(out) == ["#00ff00"]


def test_custom_needs_two_positions():
    status, _, err = run("-c", "red", "blue", "-P", "0.5")
    assert status == EXIT_FAILURE
    assert "--position needs at least 2 values" in err


def test_custom_position_count_mismatch():
    status, _, err = run("-c", "red", "lime", "blue", "-P", "0", "0.5", "0.7", "1")
    assert status == EXIT_FAILURE
    assert "custom gradient:" in err


def test_invalid_color_is_a_usage_error():
    with pytest.raises(SystemExit) as info:
        run("-c", "red", "stone")
    assert info.value.code == EXIT_FAILURE


def test_preset_and_custom_conflict():
    with pytest.raises(SystemExit) as info:
        run("-p", "rainbow", "-c", "red", "blue")
    assert info.value.code == EXIT_FAILURE


def test_take_and_sample_conflict(capsys):
    with pytest.raises(SystemExit) as info:
        run("-p", "rainbow", "-t", "2", "-s", "0.5")
    assert info.value.code == EXIT_FAILURE
    assert "gradient: error: argument" in capsys.readouterr().err


def test_css_gradient():
    status, out, _ = run("--css", "gold, red 60%, blue", "-s", "0", "0.6", "-a")
    assert status == EXIT_OK
    assert json.loads(out) == ["#ffd700", "#ff0000"]


def test_solid_background_composites_swatches():
    status, out, _ = run("--css", "rgba(255,0,0,0.5), red", "-s", "0", "-b", "white")
    assert status == EXIT_OK
    assert out == "#ff8080\n"


def test_svg_by_id():
    status, out, err = run("-f", DATA / "gradients.svg", "--svg-id", "sunset", "-s", "0", "1", "-a")
    assert status == EXIT_OK
    assert err == ""
    assert json.loads(out) == ["#ff0055", "#ffd700"]


def test_svg_with_byte_order_mark():
    status, out, err = run("-f", DATA / "bom.svg", "-s", "0", "1", "-a")
    assert status == EXIT_OK
    assert err == ""
    assert json.loads(out) == ["#ff7f50", "#4169e1"]


def test_svg_all_gradients_reports_rejects():
    status, out, err = run("-f", DATA / "gradients.svg", "-t", "2", "-a")
    assert status == EXIT_FAILURE
    assert [json.loads(line) for line in out.splitlines()] == [
        ["#ff0055", "#ffd700"],
        ["#00bfff80", "#000080"],
    ]
    assert "invalid gradient stop" in err
    assert "broken" in err


def test_svg_id_without_match():
    status, out, err = run("-f", DATA / "gradients.svg", "--svg-id", "missing")
    assert status == EXIT_FAILURE
    assert out == ""
    assert "no gradient with id 'missing'" in err


def test_malformed_svg():
    path = DATA / "broken.svg"
    status, _, err = run("-f", path)
    assert status == EXIT_FAILURE
    assert err.startswith(f"error: {path}: ")


def test_missing_and_unsupported_files(tmp_path):
    text = tmp_path / "notes.txt"
    text.write_text("red, blue")
    status, _, err = run("-f", tmp_path / "nothing.svg", text)
    assert status == EXIT_FAILURE
    assert "nothing.svg: file not found" in err
    assert "unsupported file format" in err


def test_svg_without_gradients(tmp_path):
    path = tmp_path / "plain.svg"
    path.write_text('<svg xmlns="http://www.w3.org/2000/svg"><rect width="1" height="1"/></svg>')
    status, _, err = run("-f", path)
    assert status == EXIT_FAILURE
    assert "no gradients found" in err


def test_ggr_file():
    status, out, err = run("-f", DATA / "sunrise.ggr", "-s", "0", "0.5", "1", "-a")
    assert status == EXIT_OK
    assert err == ""
    assert json.loads(out) == ["#ff0000", "#ffff00", "#0000ff"]


def test_bad_ggr_file(tmp_path):
    path = tmp_path / "bad.ggr"
    path.write_text("GIMP Gradient\n3\n")
    status, _, err = run("-f", path)
    assert status == EXIT_FAILURE
    assert str(path) in err


def test_files_continue_after_errors():
    status, out, _ = run("-f", DATA / "broken.svg", DATA / "sunrise.ggr", "-s", "1", "-a")
    assert status == EXIT_FAILURE
    assert json.loads(out) == ["#0000ff"]


def test_named_colors():
    status, out, err = run("--named-colors")
    assert status == EXIT_OK
    assert err == ""
    lines = out.splitlines()
    assert len(lines) == 149
    assert lines[0].split() == ["aliceblue", "#f0f8ff"]
    assert ["rebeccapurple", "#663399"] in [line.split() for line in lines]
    assert lines[-1].split() == ["yellowgreen", "#9acd32"]
    assert len({len(line.split()[0]) + line.count(" ") for line in lines}) == 1


def test_named_colors_follow_the_format():
    status, out, _ = run("-n", "-o", "rgb255")
    assert status == EXIT_OK
    assert "rgb(102,51,153)" in out.split()
    assert "rgb(0,0,0,0.00%)" in out.split()


class ClosedPipe(io.StringIO):
    def write(self, text):
        raise BrokenPipeError(32, "Broken pipe")


class FullDisk(io.StringIO):
    def write(self, text):
        raise OSError(28, "No space left on device")


def test_broken_pipe_is_a_clean_exit():
    stderr = io.StringIO()
    assert main(["--list-presets"], stdout=ClosedPipe(), stderr=stderr) == EXIT_OK
    assert stderr.getvalue() == ""


def test_other_write_errors_fail():
    stderr = io.StringIO()
    assert main(["--list-presets"], stdout=FullDisk(), stderr=stderr) == EXIT_FAILURE
    assert "cannot write output" in stderr.getvalue()
    assert "No space left on device" in stderr.getvalue()
