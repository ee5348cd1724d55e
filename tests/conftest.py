import pytest

NERVOUS_DOC = (
    "00:00:00 - Hello there.\n"
    "00:00:02 - I am starting to get nervous.\n"
    ":::VOCAB:::\n"
    "1.\n"
    "\"I am starting to get nervous.\"\n"
    "Nervous: lo lắng\n"
)

LESSON_DOC = (
    "00:00:01 - The weather is lovely today.\n"
    "00:00:05 - I need a deep breath.\n"
    "00:00:09 - The weather is lovely again.\n"
    "00:00:12 - Hm\n"
    ":::VOCAB:::\n"
    "1.\n"
    "\"The weather is lovely today.\" Thời tiết hôm nay đẹp.\n"
    "Key Vocabulary:\n"
    "Lovely: đáng yêu\n"
    "2.\n"
    "\"I need a deep breath.\" Tôi cần hít thở sâu.\n"
    "Key Vocabulary:\n"
    "Deep breath: hít thở sâu\n"
    "3.\n"
    "\"The weather is lovely again.\" Thời tiết lại đẹp.\n"
    "Key Vocabulary:\n"
    "Again: lại\n"
)


@pytest.fixture
def nervous_doc():
    return NERVOUS_DOC


@pytest.fixture
def lesson_doc():
    return LESSON_DOC


@pytest.fixture
def section_offsets():
    return {n: LESSON_DOC.index(f"\n{n}.\n") + 1 for n in (1, 2, 3)}
