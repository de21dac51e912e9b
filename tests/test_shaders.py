import pytest

from meshcraft.shaders import ShaderError, error_string, read_text_file


@pytest.mark.parametrize(
    "code, message",
    [
        (ShaderError.NO_ERROR, "No error"),
        (ShaderError.VS_LOAD, "Error loading vertex shader"),
        (ShaderError.FS_LOAD, "Error loading fragment shader"),
        (ShaderError.VS_COMPILE, "Error compiling vertex shader"),
        (ShaderError.FS_COMPILE, "Error compiling fragment shader"),
        (ShaderError.SHADER_LINK, "Error linking shader"),
    ],
)
def test_error_string_known_codes(code, message):
    assert error_string(code) == message


def test_error_string_accepts_plain_int():
    assert error_string(5) == error_string(ShaderError.SHADER_LINK)


@pytest.mark.parametrize("code", [6, 42, -1])
def test_error_string_unknown_code(code):
    assert error_string(code) == f"Unknown error code {code}"


def test_shader_error_order_matches_codes():
    messages = [error_string(n) for n in range(6)]
    assert messages == [
        "No error",
        "Error loading vertex shader",
        "Error loading fragment shader",
        "Error compiling vertex shader",
        "Error compiling fragment shader",
        "Error linking shader",
    ]
    assert [error_string(c) for c in ShaderError] == messages


def test_read_text_file_round_trip(tmp_path):
    text = "#version 150\nin vec4 vPosition;\nvoid main() { gl_Position = vPosition; }\n"
    path = tmp_path / "shader.vert"
    path.write_text(text, encoding="utf-8", newline="")
    assert read_text_file(path) == text
    assert read_text_file(str(path)) == text


def test_read_text_file_keeps_line_endings(tmp_path):
    path = tmp_path / "shader.frag"
    path.write_bytes(b"a\r\nb\n")
    assert read_text_file(path) == "a\r\nb\n"


def test_read_text_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text_file(tmp_path / "absent.vert")


def test_read_text_file_no_name():
    with pytest.raises(ValueError):
        read_text_file(None)


def test_read_text_file_empty(tmp_path):
    path = tmp_path / "empty.frag"
    path.write_text("")
    with pytest.raises(ValueError):
        read_text_file(path)