"""Tests for the decode_secret / encode_secret command line tools."""

import json

import pytest

import decode_secret
import encode_secret

from conftest import SAMPLE_TEXT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, restore_root_logger):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("SECRET_REGION", raising=False)


SAMPLE_ARGS = [
    "--game", "ages", "--game-id", "14129", "--hero", "Link", "--child", "Pip",
    "--animal", "dimitri", "--behavior", "4", "--linked", "--free-ring",
]


# --- decode ---

def test_decode_text(capsys):
    decode_secret.main([SAMPLE_TEXT])
    out = capsys.readouterr().out
    assert "Game ID:     14129" in out
    assert "Hero:        Link" in out
    assert "Child:       Pip" in out
    assert "Animal:      Dimitri (0x0C)" in out
    assert "Free ring:   yes" in out


def test_decode_json(capsys):
    decode_secret.main([SAMPLE_TEXT, "--json", "--pal"])
    output = json.loads(capsys.readouterr().out)
    assert output == {
        "region": "us",
        "game": "ages",
        "game_id": 14129,
        "hero": "Link",
        "child": "Pip",
        "animal": "dimitri",
        "behavior": 4,
        "is_linked_game": True,
        "is_hero_quest": False,
        "was_given_free_ring": True,
        "pal_valid": True,
        "pal_errors": [],
    }


def test_decode_rejects_typo(capsys):
    with pytest.raises(SystemExit) as exc:
        decode_secret.main(["H~2:@ ←2♦yq GB3●( 6♥?↑7"])
    assert exc.value.code == 1
    assert "Error: Checksum" in capsys.readouterr().err


def test_decode_rejects_short_secret(capsys):
    with pytest.raises(SystemExit):
        decode_secret.main(["H~2:@"])
    assert "exactly 20" in capsys.readouterr().err


# --- encode ---

def test_encode_from_options(capsys):
    encode_secret.main(SAMPLE_ARGS)
    assert capsys.readouterr().out.strip() == SAMPLE_TEXT


def test_encode_raw(capsys):
    encode_secret.main(SAMPLE_ARGS + ["--raw"])
    out = capsys.readouterr().out.strip()
    assert out == "4, 37, 51, 36, 63, 61, 51, 10, 44, 39, 3, 0, 52, 21, 48, 55, 9, 45, 59, 55"


def test_encode_numeric_animal(capsys):
    args = [a if a != "dimitri" else "0x0C" for a in SAMPLE_ARGS]
    encode_secret.main(args)
    assert capsys.readouterr().out.strip() == SAMPLE_TEXT


def test_encode_from_json(tmp_path, capsys):
    decode_secret.main([SAMPLE_TEXT, "--json"])
    path = tmp_path / "fields.json"
    path.write_text(capsys.readouterr().out, encoding="utf-8")

    encode_secret.main(["--from-json", str(path)])
    assert capsys.readouterr().out.strip() == SAMPLE_TEXT


def test_encode_invalid_behavior(capsys):
    with pytest.raises(SystemExit) as exc:
        encode_secret.main(["--behavior", "64"])
    assert exc.value.code == 1
    assert "behavior" in capsys.readouterr().err


def test_encode_unsupported_character(capsys):
    with pytest.raises(SystemExit):
        encode_secret.main(["--hero", "€"])
    assert "Error:" in capsys.readouterr().err


def test_encode_pal_warning(capsys):
    encode_secret.main(["--hero", "Link", "--pal"])
    assert "PAL warning: animal" in capsys.readouterr().err


def test_region_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("SECRET_REGION", "jp")
    with pytest.raises(SystemExit) as exc:
        encode_secret.main(SAMPLE_ARGS)
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "unverified table" in captured.err


def test_region_option_overrides_environment(monkeypatch, capsys):
    monkeypatch.setenv("SECRET_REGION", "jp")
    encode_secret.main(SAMPLE_ARGS + ["--region", "us"])
    assert capsys.readouterr().out.strip() == SAMPLE_TEXT


def test_decode_japanese_region_rejected(capsys):
    with pytest.raises(SystemExit) as exc:
        decode_secret.main([SAMPLE_TEXT, "--region", "jp"])
    assert exc.value.code == 1
    assert "unverified table" in capsys.readouterr().err
