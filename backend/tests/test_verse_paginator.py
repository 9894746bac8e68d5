from domain.services.verse_paginator import paginate_verses, split_verses

LYRICS = "A\n\nB\n\nC"

def test_split_verses():
    assert split_verses(LYRICS) == ["A", "B", "C"]
    # A single newline stays inside the verse
    assert split_verses("line 1\nline 2\n\nline 3") == ["line 1\nline 2", "line 3"]

def test_paginate_verses_pages():
    assert paginate_verses(LYRICS, page=1, limit=2) == ["A", "B"]
    assert paginate_verses(LYRICS, page=2, limit=2) == ["C"]
    assert paginate_verses(LYRICS, page=5, limit=2) == []

def test_paginate_verses_exact_boundary():
    # start == len(verses) is still in bounds and yields nothing
    assert paginate_verses(LYRICS, page=2, limit=3) == []
    assert paginate_verses(LYRICS, page=1, limit=3) == ["A", "B", "C"]

def test_paginate_verses_without_delimiter():
    assert paginate_verses("single verse", page=1, limit=10) == ["single verse"]
