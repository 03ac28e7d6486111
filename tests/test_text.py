import pytest

from sclib.text import Str

TOKENS = "token;token;token;token"


def test_create_append_and_format():
    s = Str("")
    s.append("test")
    s.append("%d" % 3)
    assert s == "test3"

    s1 = Str("test")
    s2 = Str("test")
    assert len(s1) == 4
    assert s1 == s2
    s2.set("tett")
    assert not (s1 == s2)
    s1.set_format("test%d", 3)
    assert str(s1) == "test3"


def test_from_format_and_dup():
    s1 = Str.from_format("%dtest%d", 5, 5)
    assert s1 == "5test5"
    s2 = s1.dup()
    assert s1 == s2
    s2.append("x")
    assert s1 == "5test5"
    assert s2 == "5test5x"


def test_set_and_lengths():
    s = Str("test")
    assert len(s) == 4
    s.set("testtest")
    assert s == "testtest"
    assert len(s) == 8


def test_failed_format_keeps_value():
    s = Str("test")
    with pytest.raises(TypeError):
        s.set_format("test%d", "notanumber")
    assert s == "test"


def test_none_rejected():
    with pytest.raises(TypeError):
        Str(None)


def test_trim_and_substring():
    s = Str("text")
    s.append("2")
    s.append("3")
    assert s == "text23"
    s.set(" \n\n;;;;*test ;------;")
    s.trim(" \n;*-")
    assert s == "test"
    s.substring(2, 4)
    assert s == "st"
    with pytest.raises(IndexError):
        s.substring(4, 5)
    with pytest.raises(IndexError):
        s.substring(1, 5)
    assert s == "st"


def test_trim_cases():
    c = Str("--a**00")
    c.trim("-*0")
    assert c == "a"
    c.trim("a")
    assert c == ""
    c.set("x003")
    c.trim("03")
    assert c == "x"
    c.set("\n\r\nx")
    c.trim("\n\r")
    assert c == "x"


def test_replace_same_and_shrinking():
    c = Str("test****")
    c.replace("*", "-")
    assert c == "test----"
    c.replace("--", "0")
    assert c == "test00"


@pytest.mark.parametrize("start,end", [(-1, -3), (5, 4), (2, 6), (5, 7), (2, 1)])
def test_substring_invalid(start, end):
    c = Str("n1n1")
    with pytest.raises(IndexError):
        c.substring(start, end)
    assert c == "n1n1"


def test_long_format():
    tmp = "3" * 1499
    x1 = Str.from_format("%s", tmp)
    assert x1 == tmp
    assert len(x1) == 1499


def test_many_appends():
    x1 = Str("")
    for _ in range(4000):
        x1.append("x")
    assert len(x1) == 4000
    assert str(x1) == "x" * 4000


def test_tokens_simple():
    s = Str(TOKENS)
    tokens = list(s.tokens(";"))
    assert tokens == ["token"] * 4
    assert s == TOKENS
    assert len(s) == len(TOKENS)


def test_tokens_break_early_leaves_string():
    s = Str(TOKENS)
    gen = s.tokens(";")
    assert next(gen) == "token"
    assert next(gen) == "token"
    assert s == TOKENS


def test_tokens_no_delimiter_found():
    s = Str(TOKENS)
    assert list(s.tokens("-")) == [TOKENS]


def test_tokens_first_of_pair():
    s = Str("x,x")
    assert next(s.tokens(",")) == "x"
    assert s == "x,x"


def test_tokens_empty():
    s = Str(";;;")
    assert list(s.tokens(";")) == ["", "", "", ""]


def test_tokens_multiple_delims():
    s = Str("tk1;tk2-tk3 tk4  tk5*tk6")
    assert list(s.tokens(";- *")) == [
        "tk1", "tk2", "tk3", "tk4", "", "tk5", "tk6",
    ]
    assert s == "tk1;tk2-tk3 tk4  tk5*tk6"


def test_sequence_of_edits():
    s1 = Str("test")
    s2 = s1.dup()
    assert s2 == "test"
    assert len(s2) == 4
    s1.set("test2")
    assert s1 == "test2"
    s1.set_format("test%d", 3)
    assert s1 == "test3"
    s1.append("5")
    assert s1 == "test35"
    s1.append("7")
    assert s1 == "test357"
    s1.substring(0, 4)
    assert s1 == "test"
    s1.trim("tes")
    assert s1 == ""
    s1.set_format("-;;;- \n \n \n 351234")
    s1.trim("-; 34\n")
    assert s1 == "512"


def test_replace_sequence():
    s1 = Str("test t1t1 test")
    s1.replace("t1t1", "-")
    assert s1 == "test - test"
    s1.replace("test", "longer")
    assert s1 == "longer - longer"
    s1.replace("-", "")
    s1.replace(" ", "")
    assert s1 == "longerlonger"
    assert len(s1) == len("longerlonger")
    s1.replace("as", "r")
    assert s1 == "longerlonger"
    s1.replace("r", "R")
    assert s1 == "longeRlongeR"
    s1.replace("longeR", "")
    assert s1 == ""


def test_replace_empty_old_rejected():
    s = Str("abc")
    with pytest.raises(ValueError):
        s.replace("", "x")
    assert s == "abc"


def test_trim_more():
    s1 = Str("*test * test*")
    s1.trim("*")
    assert s1 == "test * test"
    s1.set("t")
    s1.trim("*")
    assert s1 == "t"
    s1.trim("t")
    assert s1 == ""
    s1.set("testtx")
    s1.trim("a")
    assert s1 == "testtx"


def test_trim_then_replace():
    s1 = Str("   elem1,elem2, elem3   ")
    s1.trim(" ")
    assert s1 == "elem1,elem2, elem3"
    s1.replace(" ", "")
    assert s1 == "elem1,elem2,elem3"
    s1 = Str("elem1,elem2,elem3")
    s1.replace("elem", "item")
    assert s1 == "item1,item2,item3"


def test_compare_different():
    s1 = Str("de1")
    s2 = Str("de2")
    assert not (s1 == s2)
    s1.set("dee2")
    assert not (s1 == s2)
    assert Str("de2") == s2