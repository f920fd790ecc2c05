import pytest

from zappyserver.settings import ServerSettings, SettingsError, format_banner, parse_settings

BASE = ["-p", "4242", "-x", "10", "-y", "20", "-c", "5", "-t", "100", "-n", "alpha", "beta"]


def test_parse_full_arguments():
    settings = parse_settings(BASE)
    assert settings == ServerSettings(
        port=4242, width=20, height=10, connexion_max=5, time_unit=100.0, teams_name=["alpha", "beta"]
    )


def test_fractional_time_unit():
    args = ["-p", "1", "-x", "2", "-y", "3", "-c", "4", "-t", "0.5", "-n", "a"]
    assert parse_settings(args).time_unit == 0.5


def test_missing_port():
    with pytest.raises(SettingsError, match="Erreur: argument -p non trouvé ou invalide"):
        parse_settings(BASE[2:])


def test_value_starting_with_dash_is_rejected():
    args = ["-p", "-4242"] + BASE[2:]
    with pytest.raises(SettingsError, match="-p"):
        parse_settings(args)


def test_non_numeric_value_is_rejected():
    args = ["-p", "4242", "-x", "ten"] + BASE[4:]
    with pytest.raises(SettingsError, match="-x"):
        parse_settings(args)


def test_later_valid_occurrence_is_used():
    args = ["-p", "abc", "-p", "8080"] + BASE[2:]
    assert parse_settings(args).port == 8080


def test_out_of_range_port_rejected():
    args = ["-p", "99999999999"] + BASE[2:]
    with pytest.raises(SettingsError):
        parse_settings(args)


def test_missing_team_flag():
    with pytest.raises(SettingsError, match="Erreur: flag -n manquant"):
        parse_settings(BASE[:-3])


def test_team_flag_without_names():
    with pytest.raises(SettingsError, match="Erreur: au moins une équipe est requise après -n"):
        parse_settings(BASE[:-2])


def test_team_names_stop_at_next_flag():
    args = ["-n", "alpha", "beta", "-p", "4242", "-x", "10", "-y", "20", "-c", "5", "-t", "100"]
    assert parse_settings(args).teams_name == ["alpha", "beta"]


def test_banner_contents():
    settings = parse_settings(BASE)
    banner = format_banner(settings)
    assert "127.0.0.1:4242" in banner
    assert f"{settings.width} x {settings.height} px" in banner
    assert "alpha, beta" in banner
    assert "100t" in banner