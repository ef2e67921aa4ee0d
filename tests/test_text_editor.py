from beltworks.text_editor import Editor, type_text


def test_editing_swaps_words():
    editor = Editor()
    text_len = 12
    first_part_len = 7
    type_text(editor, "hello, world")
    for _ in range(text_len):
        editor.left()
    editor.cut(first_part_len)
    for _ in range(text_len - first_part_len):
        editor.right()
    type_text(editor, ", ")
    editor.paste()
    editor.left()
    editor.left()
    editor.cut(3)
    assert editor.text() == "world, hello"


def test_editing_fixes_misprint():
    editor = Editor()
    type_text(editor, "misprnit")
    editor.left()
    editor.left()
    editor.left()
    editor.cut(1)
    editor.right()
    editor.paste()
    assert editor.text() == "misprint"


def test_reverse():
    editor = Editor()
    for ch in "esreveR":
        editor.insert(ch)
        editor.left()
    assert editor.text() == "Reverse"


def test_no_text():
    editor = Editor()
    assert editor.text() == ""
    editor.left()
    editor.left()
    editor.right()
    editor.right()
    editor.copy(0)
    editor.cut(0)
    editor.paste()
    assert editor.text() == ""


def test_empty_buffer():
    editor = Editor()
    editor.paste()
    type_text(editor, "example")
    editor.left()
    editor.left()
    editor.paste()
    editor.right()
    editor.paste()
    editor.copy(0)
    editor.paste()
    editor.left()
    editor.cut(0)
    editor.paste()
    assert editor.text() == "example"


def test_multiple_paste():
    editor = Editor()
    type_text(editor, "text")
    editor.left()
    editor.copy(1)
    for _ in range(3):
        editor.paste()
    assert editor.text() == "textttt"


def test_cut_beyond_end_takes_rest_only():
    editor = Editor()
    type_text(editor, "abc")
    editor.left()
    editor.cut(10)
    assert editor.text() == "ab"
    editor.paste()
    assert editor.text() == "abc"