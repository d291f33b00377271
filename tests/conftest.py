import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from name_forge.core import NameSegment, PositionalData, SegmentKind


CORPUS_HEADER = "name,clean name,syllables,count,first part,gender\n"


@pytest.fixture
def write_corpus(tmp_path):
    """Factory writing corpus rows (already comma-joined) to a CSV file."""

    def _write(rows, filename="corpus.csv"):
        path = tmp_path / filename
        body = "".join(f"{row}\n" for row in rows)
        path.write_text(CORPUS_HEADER + body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def balanced_rows():
    """Four male and two female names sharing the ``ra`` syllable."""

    return [
        "Ra'zan,Razan,ra.zan,1,1,m",
        "Ra'kesh,Rakesh,ra.kesh,1,1,m",
        "Vol'jin,Voljin,vol.jin,1,1,m",
        "Zul'jin,Zuljin,zul.jin,1,1,m",
        "Ra'ka,Raka,ra.ka,1,1,f",
        "Ti'ka,Tika,ti.ka,1,1,f",
    ]


def make_segment(text, kind=SegmentKind.SYLLABLE, *, start=0.0, middle=0.0, end=0.0, gender=0.5):
    return NameSegment(
        segment_kind=kind,
        text=text,
        derived_names=(f"{text.title()}name",),
        positional_data=PositionalData(
            overall=start + middle + end,
            start=start,
            middle=middle,
            end=end,
        ),
        gender_ratio=gender,
    )
