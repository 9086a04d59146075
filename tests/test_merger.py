from company_search.merger import dedupe, merge
from company_search.models import CompanyRecord


def make(name, number, source="Companies House UK", jurisdiction="GB", address=None):
    return CompanyRecord(source=source, name=name, company_number=number, jurisdiction=jurisdiction, address=address)


def test_same_number_and_jurisdiction_keeps_higher_priority_source():
    uk = make("Acme Limited", "01234567", source="Companies House UK")
    oc = make("ACME LTD (formerly Acme Trading)", "01234567", source="OpenCorporates", jurisdiction="gb")

    merged = merge([[uk], [oc]])

    assert merged == [uk]


def test_jurisdiction_case_does_not_split_duplicates():
    first = make("Alpha", "1", jurisdiction="US-DE")
    second = make("Beta", "1", jurisdiction="us-de", source="OpenCorporates")
    assert dedupe([first, second]) == [first]


def test_same_normalized_name_collapses_even_with_different_numbers():
    # Accepted over-merge: distinct registrations that share a name keep only the first
    gb = make("Acme Ltd", "01234567", jurisdiction="GB")
    ie = make("ACME LTD.", "654321", source="OpenCorporates (IE)", jurisdiction="IE")

    assert merge([[gb], [ie]]) == [gb]


def test_same_number_in_different_jurisdictions_is_kept():
    gb = make("Northwind", "100", jurisdiction="GB")
    ee = make("Southwind", "100", source="Estonia e-Business Register", jurisdiction="EE")
    assert dedupe([gb, ee]) == [gb, ee]


def test_addressed_records_first_with_priority_order_preserved():
    a = make("A", "1", address=None)
    b = make("B", "2", address="1 Road, Town")
    c = make("C", "3", source="Estonia e-Business Register", jurisdiction="EE", address=None)
    d = make("D", "4", source="OpenCorporates", jurisdiction="US-DE", address="2 Street, Dover")
    e = make("E", "5", source="OpenCorporates", jurisdiction="US-DE", address="")

    merged = merge([[a, b], [c], [d, e]])

    assert [r.name for r in merged] == ["B", "D", "A", "C", "E"]


def test_truncates_to_page_size():
    records = [make(f"Company {i}", str(i)) for i in range(20)]
    assert len(merge([records], page_size=12)) == 12
    assert merge([records], page_size=3) == records[:3]


def test_empty_input():
    assert merge([]) == []
    assert merge([[], []]) == []
