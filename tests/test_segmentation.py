import pytest

from name_forge.core import (
    DataError,
    EnumeratedSplits,
    KnownSplit,
    LoneSplit,
    Name,
    NameRecord,
    PartEntry,
    PartPosition,
    parse_record,
    split_syllables,
)


def _record(syllables, first_part=None, gender="m", name="Test"):
    return NameRecord(
        name=name,
        clean_name=name,
        syllables=syllables,
        count=1,
        first_part=first_part,
        gender=gender,
    )


def test_single_syllable_name_has_one_lone_part():
    name = Name.from_record(_record("gonk"))

    assert isinstance(name.split, LoneSplit)
    assert name.possible_parts == (PartEntry("gonk", 1, PartPosition.LONE),)
    assert name.guaranteed_parts == ()


def test_declared_boundary_produces_guaranteed_pair():
    name = Name.from_record(_record("a.kil.zon", first_part=2))

    assert isinstance(name.split, KnownSplit)
    assert name.possible_parts == ()
    first, second = name.guaranteed_parts
    assert first == PartEntry("akil", 2, PartPosition.FIRST)
    assert second == PartEntry("zon", 1, PartPosition.SECOND)
    assert first.value + second.value == "".join(name.syllables)
    assert first.len + second.len == len(name.syllables)


@pytest.mark.parametrize("syllables", ["ra.zan", "ras.ta.khan", "bwon.sam.di.lo", "a.b.c.d.e"])
def test_ambiguous_name_enumerates_every_boundary(syllables):
    name = Name.from_record(_record(syllables))
    count = len(syllables.split("."))

    assert isinstance(name.split, EnumeratedSplits)
    assert name.guaranteed_parts == ()
    assert len(name.possible_parts) == 2 * (count - 1)
    for first, second in name.split.hypotheses:
        assert first.position is PartPosition.FIRST
        assert second.position is PartPosition.SECOND
        assert first.value + second.value == syllables.replace(".", "")


def test_split_syllables_lists_hypotheses_in_boundary_order():
    split = split_syllables(("ras", "ta", "khan"))

    assert [(first.value, second.value) for first, second in split.hypotheses] == [
        ("ras", "takhan"),
        ("rasta", "khan"),
    ]


@pytest.mark.parametrize("boundary", [0, 2, 5, -1])
def test_out_of_range_boundary_is_a_data_error(boundary):
    with pytest.raises(DataError) as excinfo:
        Name.from_record(_record("zan.gar", first_part=boundary))

    assert "boundary" in str(excinfo.value)


def test_empty_syllable_is_rejected():
    with pytest.raises(DataError):
        Name.from_record(_record("zan..gar"))


def test_parse_record_gender_code_is_case_sensitive():
    record = parse_record(
        {
            "name": "Zul'jin",
            "clean name": "Zuljin",
            "syllables": "Zul.Jin",
            "count": "1",
            "first part": "1",
            "gender": "M",
        }
    )

    assert record.syllables == "zul.jin"
    assert record.gender == "M"
    name = Name.from_record(record)
    assert not name.is_male and not name.is_female


def test_parse_record_accepts_blank_boundary_and_unknown_gender():
    record = parse_record(
        {
            "name": "Torga",
            "clean name": "Torga",
            "syllables": "tor.ga",
            "count": "3",
            "first part": "",
            "gender": "u",
        }
    )

    assert record.first_part is None
    assert record.count == 3
    assert record.gender == "u"
    name = Name.from_record(record)
    assert not name.is_male and not name.is_female


@pytest.mark.parametrize(
    "field, value",
    [
        ("gender", "mf"),
        ("gender", ""),
        ("count", "-1"),
        ("count", "many"),
        ("first part", "one"),
        ("name", ""),
    ],
)
def test_parse_record_rejects_malformed_fields(field, value):
    row = {
        "name": "Zan'gar",
        "clean name": "Zangar",
        "syllables": "zan.gar",
        "count": "1",
        "first part": "1",
        "gender": "m",
    }
    row[field] = value

    with pytest.raises(DataError) as excinfo:
        parse_record(row, row_number=7)

    assert excinfo.value.row == 7
    assert str(excinfo.value).startswith("row 7:")


def test_parse_record_reports_missing_columns():
    with pytest.raises(DataError) as excinfo:
        parse_record({"name": "Gonk", "syllables": "gonk"})

    assert "gender" in str(excinfo.value)
