from pathlib import Path

import pytest

from name_forge.core import (
    CorpusLoader,
    DataError,
    NameSegment,
    SegmentKind,
    analyze_corpus,
    read_corpus,
    read_output_records,
    to_segments,
    write_output_records,
)
from name_forge.core.corpus_loader import PART_TABLE, SYLLABLE_TABLE, default_corpus_path


def test_read_corpus_parses_rows(write_corpus, balanced_rows):
    records = read_corpus(write_corpus(balanced_rows))

    assert [record.name for record in records][:2] == ["Ra'zan", "Ra'kesh"]
    assert records[0].syllables == "ra.zan"
    assert records[0].first_part == 1


def test_malformed_row_aborts_the_load_with_row_number(write_corpus, balanced_rows):
    rows = balanced_rows + ["Gonk,Gonk,gonk,1,,male"]

    with pytest.raises(DataError) as excinfo:
        read_corpus(write_corpus(rows))

    assert excinfo.value.row == len(rows) + 1


def test_out_of_range_boundary_aborts_analysis(write_corpus):
    path = write_corpus(["Zan'gar,Zangar,zan.gar,1,4,m"])

    with pytest.raises(DataError):
        analyze_corpus(read_corpus(path))


def test_missing_column_is_reported(tmp_path):
    path = tmp_path / "corpus.csv"
    path.write_text("name,syllables,gender\nGonk,gonk,m\n", encoding="utf-8")

    with pytest.raises(DataError) as excinfo:
        read_corpus(path)

    assert "count" in str(excinfo.value)


def test_invalid_encoding_is_a_data_error(tmp_path):
    path = tmp_path / "corpus.csv"
    path.write_bytes(
        b"name,clean name,syllables,count,first part,gender\nZan\xffgar,Zangar,zan.gar,1,1,m\n"
    )

    with pytest.raises(DataError) as excinfo:
        read_corpus(path)

    assert "UTF-8" in str(excinfo.value)


def test_names_column_lists_contributors_once(write_corpus):
    rows = ["Zan'gar,Zangar,zan.gar,1,1,m", "Zanza,Zanza,zan.za,1,,m", "Kaka,Kaka,ka.ka,1,,f"]

    analysis = analyze_corpus(read_corpus(write_corpus(rows)))
    syllables = {record.text: record for record in analysis.syllables}

    assert syllables["zan"].names == "Zan'gar;Zanza"
    assert syllables["ka"].names == "Kaka"
    assert syllables["zan"].segment_kind is SegmentKind.SYLLABLE
    assert all(record.segment_kind is SegmentKind.PART for record in analysis.parts)
    assert all(record.middle_val == 0.0 for record in analysis.parts)


def test_output_tables_round_trip(tmp_path, write_corpus, balanced_rows):
    analysis = analyze_corpus(read_corpus(write_corpus(balanced_rows)))
    path = tmp_path / "out" / "syllable_data.csv"

    written = write_output_records(path, analysis.syllables)

    assert written == len(analysis.syllables)
    assert read_output_records(path) == list(analysis.syllables)


def test_segments_preserve_kind_text_and_scores(write_corpus, balanced_rows):
    analysis = analyze_corpus(read_corpus(write_corpus(balanced_rows)))

    for record, segment in zip(analysis.parts, to_segments(analysis.parts)):
        assert segment.segment_kind is record.segment_kind
        assert segment.text == record.text
        assert segment.positional_data.overall == record.overall_val
        assert segment.positional_data.start == record.start_val
        assert segment.positional_data.middle == record.middle_val
        assert segment.positional_data.end == record.end_val
        assert segment.derived_names == tuple(record.names.split(";"))


def test_segment_from_record_with_no_names():
    from name_forge.core import OutputRecord

    record = OutputRecord(SegmentKind.SYLLABLE, "ta", 1.0, 0.0, 1.0, 0.0, "", 0.5)

    assert NameSegment.from_record(record).derived_names == ()


def test_output_row_with_bad_score_is_rejected(tmp_path):
    path = tmp_path / "word_data.csv"
    path.write_text(
        "segment_kind,str,overall_val,start_val,middle_val,end_val,names,gender_ratio\n"
        "Part,zan,two,1.0,0.0,1.0,Zan'gar,0.5\n",
        encoding="utf-8",
    )

    with pytest.raises(DataError) as excinfo:
        read_output_records(path)

    assert excinfo.value.row == 2


def test_loader_exports_tables(tmp_path, write_corpus, balanced_rows):
    out_dir = tmp_path / "tables"
    loader = CorpusLoader(write_corpus(balanced_rows), output_dir=out_dir)

    analysis = loader.load()

    assert read_output_records(out_dir / SYLLABLE_TABLE) == list(analysis.syllables)
    assert read_output_records(out_dir / PART_TABLE) == list(analysis.parts)


def test_loader_missing_file_is_a_data_error(tmp_path):
    loader = CorpusLoader(tmp_path / "absent.csv")

    with pytest.raises(DataError):
        loader.load()


def test_default_corpus_path_honours_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("NAME_FORGE_CORPUS", str(tmp_path / "custom.csv"))

    assert default_corpus_path() == tmp_path / "custom.csv"


def test_packaged_corpus_loads(monkeypatch):
    monkeypatch.delenv("NAME_FORGE_CORPUS", raising=False)
    monkeypatch.delenv("NAME_FORGE_OUTPUT_DIR", raising=False)

    analysis = CorpusLoader().load()

    assert default_corpus_path().name == "syllables.csv"
    assert isinstance(default_corpus_path(), Path)
    assert len(analysis.names) == 50
    assert analysis.parts and analysis.syllables
