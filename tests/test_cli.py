import hashlib

import pytest
from PIL import Image

from avatar.cli import build_parser, main
from avatar.errors import EncodingError


def test_cli_writes_png(tmp_path, capsys):
    out = tmp_path / "alice.png"
    code = main(["alice@example.com", "--timestamp", "1704067200", "--out", str(out)])
    assert code == 0
    assert out.exists()
    assert Image.open(out).size == (64, 64)

    stdout = capsys.readouterr().out
    expected = hashlib.sha256(b"alice@example.com:2024-01-01").hexdigest()
    assert f"hash={expected}" in stdout
    assert "time_key=2024-01-01" in stdout
    assert f"file={out}" in stdout


def test_cli_size_128(tmp_path):
    out = tmp_path / "big.png"
    assert main(["bob", "--size", "128", "--timestamp", "0", "--out", str(out)]) == 0
    assert Image.open(out).size == (128, 128)


def test_cli_default_output_name(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["carol", "--timestamp", "1704067200"]) == 0
    digest = hashlib.sha256(b"carol:2024-01-01").hexdigest()
    assert (tmp_path / f"avatar-{digest[:12]}.png").exists()


@pytest.mark.parametrize(
    "argv",
    [
        ["alice", "--timestamp", "yesterday"],
        ["   "],
        ["alice", "--size", "100"],
        [],
    ],
)
def test_cli_usage_errors_exit_2(tmp_path, argv):
    with pytest.raises(SystemExit) as exc:
        main(argv + ["--out", str(tmp_path / "x.png")])
    assert exc.value.code == 2


def test_cli_encoding_failure_returns_1(tmp_path, monkeypatch):
    def boom(canvas, path):
        raise EncodingError("failed to encode image")

    monkeypatch.setattr("avatar.cli.save_png", boom)
    assert main(["alice", "--timestamp", "0", "--out", str(tmp_path / "x.png")]) == 1


def test_cli_config_sets_default_size(tmp_path):
    cfg = tmp_path / "avatar.yaml"
    cfg.write_text("render:\n  default_size: 128\n", encoding="utf-8")
    out = tmp_path / "cfg.png"
    assert main(["dave", "--config", str(cfg), "--timestamp", "0", "--out", str(out)]) == 0
    assert Image.open(out).size == (128, 128)


def test_parser_defaults():
    args = build_parser(64).parse_args(["erin"])
    assert args.size == 64
    assert args.timestamp == ""
    assert args.out is None
