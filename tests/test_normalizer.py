from company_search.normalizer import (
    assemble_address,
    canonical_jurisdiction,
    collapse_address,
    join_address,
    name_key,
    record_url,
    translate_status,
)
from company_search.registries import COMPANIES_HOUSE, ESTONIA, OPENCORPORATES, RegistryProfile


def test_jurisdiction_compound_codes_are_hyphenated_and_uppercased():
    assert canonical_jurisdiction("us_de") == "US-DE"
    assert canonical_jurisdiction("gb") == "GB"
    assert canonical_jurisdiction("ae_du") == "AE-DU"


def test_jurisdiction_aliases_use_the_lookup_table():
    assert canonical_jurisdiction("uk") == "GB"
    assert canonical_jurisdiction("el") == "GR"


def test_unknown_jurisdiction_passes_through():
    assert canonical_jurisdiction("ca_bc") == "CA-BC"
    assert canonical_jurisdiction("zz") == "ZZ"


def test_empty_jurisdiction_is_none():
    assert canonical_jurisdiction(None) is None
    assert canonical_jurisdiction("  ") is None


def test_join_address_skips_absent_components():
    assert join_address(["1 High St", None, "", "  ", "London", "EC1A 1AA"]) == "1 High St, London, EC1A 1AA"
    assert join_address([None, ""]) is None


def test_full_address_field_wins_over_components():
    assert assemble_address("Main 1, Tallinn", ["Other 2", "Tartu"]) == "Main 1, Tallinn"
    assert assemble_address(None, ["Other 2", "Tartu"]) == "Other 2, Tartu"
    assert assemble_address("   ", []) is None


def test_multi_address_input_collapses_to_first_usable_entry():
    assert collapse_address(["", None, "Harju maakond, Tallinn", "second"]) == "Harju maakond, Tallinn"
    assert collapse_address([]) is None


def test_status_translation_with_passthrough():
    assert translate_status("K", ESTONIA) == "Deleted"
    assert translate_status("Likvideerimisel", ESTONIA) == "In liquidation"
    assert translate_status("liquidation", COMPANIES_HOUSE) == "In liquidation"
    assert translate_status("Dormant", OPENCORPORATES) == "Dormant"


def test_missing_status_uses_registry_default():
    assert translate_status(None, ESTONIA) == "Active"
    assert translate_status(None, COMPANIES_HOUSE) is None


def test_record_url_falls_back_to_register_site():
    assert record_url("https://example.test/c/1", OPENCORPORATES) == "https://example.test/c/1"
    assert record_url(None, OPENCORPORATES) == "https://opencorporates.com/"


def test_name_key_strips_punctuation_and_case():
    assert name_key("ACME Ltd.") == "acmeltd"
    assert name_key("Acme-Ltd") == "acmeltd"
    assert name_key(None) == ""


def test_profile_without_status_map_passes_statuses_through():
    profile = RegistryProfile(key="xx", label="Test Register", register_url="https://registry.test/")

    assert dict(profile.status_map) == {}
    assert translate_status("Struck off", profile) == "Struck off"
    assert translate_status(None, profile) is None
