from htmltext.text import capitalise_each_word, split_camel_case_words


def test_split_camel_case_words() -> None:
    assert split_camel_case_words("HelloThereFriend") == "Hello There Friend"
    assert split_camel_case_words("Already Spaced") == "Already Spaced"
    assert split_camel_case_words("ABC") == "A B C"
    assert split_camel_case_words("") == ""


def test_capitalise_each_word() -> None:
    assert capitalise_each_word("hello WORLD  a") == "Hello World A"
    assert capitalise_each_word("x") == "X"
    assert capitalise_each_word(None) == ""
