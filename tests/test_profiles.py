from pathlib import Path

from spacer.profiles import CSHARP_PROFILE, PLAIN_PROFILE, profile_for_path


def test_csharp_extension_selects_string_aware_profile():
    assert profile_for_path("Program.cs") is CSHARP_PROFILE
    assert profile_for_path(Path("src/Upper.CS")) is CSHARP_PROFILE


def test_other_extensions_are_plain():
    assert profile_for_path("notes.txt") is PLAIN_PROFILE
    assert profile_for_path("Makefile") is PLAIN_PROFILE


def test_custom_extension_list():
    assert profile_for_path("script.csx", [".cs", ".csx"]) is CSHARP_PROFILE
    assert profile_for_path("Program.cs", [".csx"]) is PLAIN_PROFILE


def test_profile_flags():
    assert CSHARP_PROFILE.string_aware is True
    assert PLAIN_PROFILE.string_aware is False
    assert CSHARP_PROFILE.name == "c#"
    assert PLAIN_PROFILE.name == "other"
