from datetime import time

import pytest

from django_tracks.config_loader import load_proposals_config


def test_load_proposals_config_keeps_file_order(tmp_path):
    config_file = tmp_path / "proposals.toml"
    config_file.write_text("""event_name = "PyCon Test"

[venue]
morning_start = 09:30:00
networking_end = "17:30"

[[proposals]]
title = "Lua for the Masses"
duration = "30min"

[[proposals]]
title = "Rails for Python Developers"
duration = "lightning"

[[proposals]]
title = "Rails Magic"
duration = 60
""")

    conf = load_proposals_config(config_file)

    assert conf["event_name"] == "PyCon Test"
    assert [p["title"] for p in conf["proposals"]] == [
        "Lua for the Masses",
        "Rails for Python Developers",
        "Rails Magic",
    ]
    assert conf["proposals"][2]["duration"] == 60
    assert conf["venue"]["morning_start"] == time(9, 30)
    assert conf["venue"]["networking_end"] == "17:30"


def test_load_proposals_config_defaults(tmp_path):
    config_file = tmp_path / "proposals.toml"
    config_file.write_text("""[[proposals]]
title = "Woah"
duration = "30min"
""")

    conf = load_proposals_config(config_file)

    assert conf["event_name"] is None
    assert conf["venue"] == {}


def test_load_proposals_config_file_not_found(tmp_path):
    missing = tmp_path / "does_not_exist.toml"

    with pytest.raises(FileNotFoundError, match="Proposals file not found"):
        load_proposals_config(missing)


def test_load_proposals_config_invalid_toml(tmp_path):
    config_file = tmp_path / "proposals.toml"
    config_file.write_text("this is [[[not valid toml")

    with pytest.raises(ValueError, match="Invalid TOML in"):
        load_proposals_config(config_file)


def test_load_proposals_config_missing_proposals(tmp_path):
    config_file = tmp_path / "proposals.toml"
    config_file.write_text('event_name = "Empty"\n')

    with pytest.raises(ValueError, match=r"Missing required \[\[proposals\]\] array"):
        load_proposals_config(config_file)


def test_load_proposals_config_proposals_not_a_list(tmp_path):
    config_file = tmp_path / "proposals.toml"
    config_file.write_text("""[proposals]
title = "Woah"
""")

    with pytest.raises(ValueError, match="proposals must be a list of tables"):
        load_proposals_config(config_file)


def test_load_proposals_config_missing_required_fields(tmp_path):
    config_file = tmp_path / "proposals.toml"
    config_file.write_text("""[[proposals]]
title = "Woah"
""")

    with pytest.raises(ValueError, match=r"proposals\[0\] is missing required fields: duration"):
        load_proposals_config(config_file)


def test_load_proposals_config_blank_title(tmp_path):
    config_file = tmp_path / "proposals.toml"
    config_file.write_text("""[[proposals]]
title = "  "
duration = "30min"
""")

    with pytest.raises(ValueError, match=r"proposals\[0\].title must be a non-empty string"):
        load_proposals_config(config_file)


def test_load_proposals_config_bad_duration_type(tmp_path):
    config_file = tmp_path / "proposals.toml"
    config_file.write_text("""[[proposals]]
title = "Woah"
duration = 30.5
""")

    with pytest.raises(ValueError, match=r"proposals\[0\].duration must be a string or an integer"):
        load_proposals_config(config_file)


def test_load_proposals_config_entry_not_a_table(tmp_path):
    config_file = tmp_path / "proposals.toml"
    config_file.write_text('proposals = ["Woah"]\n')

    with pytest.raises(TypeError, match=r"proposals\[0\] must be a mapping, got str"):
        load_proposals_config(config_file)


def test_load_proposals_config_rejects_bad_venue(tmp_path):
    config_file = tmp_path / "proposals.toml"
    config_file.write_text("""[venue]
lunch_start = 08:00:00

[[proposals]]
title = "Woah"
duration = "30min"
""")

    with pytest.raises(ValueError, match="morning_start must be before lunch_start"):
        load_proposals_config(config_file)


def test_load_proposals_config_blank_event_name(tmp_path):
    config_file = tmp_path / "proposals.toml"
    config_file.write_text("""event_name = ""

[[proposals]]
title = "Woah"
duration = "30min"
""")

    with pytest.raises(ValueError, match="event_name must be a non-empty string"):
        load_proposals_config(config_file)
