from __future__ import annotations

import pytest

from jka_query.constants import STATUS_FIELDS, CvarType, GameType
from jka_query.errors import ErrorKind, StructureError
from jka_query.models import PlayerRecord, StatusVariant, strip_colors
from jka_query.parsers import (
    parse_cvar_pairs,
    parse_cvar_value,
    parse_player_line,
    parse_rcon_player_row,
    parse_status,
    strip_oob_header,
    strip_print_headers,
)

PLAIN_REPLY = (
    "\xff\xff\xff\xffstatusResponse\n"
    "\\sv_hostname\\^1My^7Server\\g_gametype\\8\\mapname\\mp/ctf_bespin"
    "\\sv_maxclients\\32\\g_needpass\\0\\gamename\\basejka\\custom_cvar\\1\n"
    "10 48 \"^2Kyle^7\"\n"
    "-3 999 \"Jan Ors\"\n"
)

RCON_REPLY = (
    "\xff\xff\xff\xffprint\n"
    "map: mp/ffa3\n"
    "num score ping name            lastmsg address               qport rate\n"
    "--- ----- ---- --------------- ------- --------------------- ----- -----\n"
    "  0     5   48 Padawan^7             0 10.0.0.7:29071         1234 25000\n"
    "\xff\xff\xff\xffprint\n"
    "  1    12   0 Darth Vader^7        50 bot                       0 16384\n"
    "  2     0 CNCT Newcomer^7        1200 192.168.1.20:29070    4567 5000\n"
    "\n"
)


def test_parse_cvar_value_from_info_string():
    text = "\\sv_hostname\\MyServer\\g_gametype\\0"
    assert parse_cvar_value(text, "sv_hostname") == "MyServer"
    assert parse_cvar_value(text, "g_gametype") == "0"
    assert parse_cvar_value(text, "g_gametype", CvarType.GAMETYPE) is GameType.FFA
    assert parse_cvar_value(text, "fraglimit") is None


def test_parse_cvar_value_only_matches_name_positions():
    # "MyServer" is a value, never a name
    assert parse_cvar_value("\\sv_hostname\\MyServer\\x\\y", "MyServer") is None


def test_parse_cvar_value_ignores_case_and_header():
    assert parse_cvar_value(PLAIN_REPLY, "SV_MAXCLIENTS") == "32"


def test_parse_cvar_value_undecodable_gametype():
    assert parse_cvar_value("\\g_gametype\\42", "g_gametype", CvarType.GAMETYPE) is None
    assert parse_cvar_value("\\g_gametype\\ctf", "g_gametype", CvarType.GAMETYPE) is None


def test_parse_cvar_pairs_drops_dangling_name():
    assert parse_cvar_pairs("\\a\\1\\b\\2\\c") == {"a": "1", "b": "2"}
    assert parse_cvar_pairs("\\a\\\\b\\2") == {"a": "", "b": "2"}
    assert parse_cvar_pairs("") == {}


def test_strip_oob_header_variants():
    assert strip_oob_header("\xff\xff\xff\xffstatusResponse\n\\a\\1") == "\\a\\1"
    assert strip_oob_header("\ufffd\ufffd\ufffd\ufffdstatusResponse\n\\a\\1") == "\\a\\1"
    assert strip_oob_header("\\a\\1") == "\\a\\1"


def test_parse_plain_status():
    document = parse_status(PLAIN_REPLY, StatusVariant.PLAIN_STATUS)

    assert document.variant is StatusVariant.PLAIN_STATUS
    assert set(document.cvars) == set(STATUS_FIELDS)
    assert document.hostname == "^1My^7Server"
    assert document.cvars["mapname"] == "mp/ctf_bespin"
    assert document.cvars["fraglimit"] is None
    assert "custom_cvar" not in document.cvars
    assert document.gametype is GameType.CTF
    assert document.cvar("g_gametype") is GameType.CTF
    assert document.players == [
        PlayerRecord(score=10, ping=48, name="^2Kyle^7"),
        PlayerRecord(score=-3, ping=999, name="Jan Ors"),
    ]
    assert document.players[0].clean_name == "Kyle"


def test_parse_plain_status_without_header_or_players():
    document = parse_status("\\sv_hostname\\Lonely\n")
    assert document.hostname == "Lonely"
    assert document.players == []
    assert document.gametype is None


def test_parse_plain_status_skips_malformed_player_lines():
    raw = (
        "\\sv_hostname\\X\n"
        "5 20 \"Good\"\n"
        "garbage\n"
        "x 20 \"BadScore\"\n"
        "7 \"NoPing\"\n"
        "1 2 \"Also Good\"\n"
    )
    names = [player.name for player in parse_status(raw).players]
    assert names == ["Good", "Also Good"]


def test_parse_plain_status_is_idempotent():
    first = parse_status(PLAIN_REPLY)
    second = parse_status(PLAIN_REPLY)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_parse_player_line():
    assert parse_player_line('0 0 "Name With Spaces"') == PlayerRecord(0, 0, "Name With Spaces")
    assert parse_player_line("3 40 Unquoted") == PlayerRecord(3, 40, "Unquoted")
    assert parse_player_line("3 40") is None


def test_parse_rcon_status():
    document = parse_status(RCON_REPLY, StatusVariant.RCON_STATUS)

    assert document.variant is StatusVariant.RCON_STATUS
    assert document.map_name == "mp/ffa3"
    assert document.cvars == {}
    assert [player.num for player in document.players] == [0, 1, 2]

    padawan, vader, newcomer = document.players
    assert padawan == PlayerRecord(
        score=5, ping=48, name="Padawan^7", num=0, lastmsg=0,
        address="10.0.0.7:29071", qport=1234, rate=25000,
    )
    assert vader.name == "Darth Vader^7"
    assert vader.clean_name == "Darth Vader"
    assert vader.address == "bot"
    assert newcomer.ping is None


def test_parse_rcon_status_requires_two_lines():
    with pytest.raises(StructureError) as exc:
        parse_status("map: q3dm17", StatusVariant.RCON_STATUS)
    assert exc.value.kind is ErrorKind.STRUCTURE

    with pytest.raises(StructureError):
        parse_status("\xff\xff\xff\xffprint\n", StatusVariant.RCON_STATUS)


def test_parse_rcon_status_map_line():
    document = parse_status("map: q3dm17\n", StatusVariant.RCON_STATUS)
    assert document.map_name == "q3dm17"
    assert document.players == []

    unmatched = parse_status("map:\nnum score ping\n", StatusVariant.RCON_STATUS)
    assert unmatched.map_name is None


def test_parse_rcon_status_excludes_header_separator_and_bad_rows():
    raw = (
        "map: mp/duel1\n"
        "num score ping name lastmsg address qport rate\n"
        "--- ----- ---- ---- ------- ------- ----- ----\n"
        "  0 1 2 Short\n"
        "  x 1 2 Broken 0 1.2.3.4:5 6 7\n"
        "  4 1 2 Fine 0 1.2.3.4:5 6 7\n"
    )
    document = parse_status(raw, StatusVariant.RCON_STATUS)
    assert [player.name for player in document.players] == ["Fine"]


def test_parse_rcon_player_row_ping_states():
    row = "  3    0 ZMBI Ghost^7   400 1.2.3.4:29070  111 3000"
    assert parse_rcon_player_row(row).ping is None
    assert parse_rcon_player_row("  3 0 ABCD Ghost 400 1.2.3.4:29070 111 3000") is None


def test_strip_print_headers_removes_every_header():
    raw = "\xff\xff\xff\xffprint\nfirst\n\xff\xff\xff\xffprint\nsecond\n"
    assert strip_print_headers(raw) == "first\nsecond\n"


def test_strip_colors():
    assert strip_colors("^1Red^7White^^") == "RedWhite^^"
