import pytest

from classicalgo.kmp import describe_matches, kmp_search, main, prefix_function


def test_prefix_function_worked_example():
    assert prefix_function("ABABCABAB") == [0, 0, 1, 2, 0, 1, 2, 3, 4]


def test_prefix_function_length_matches_pattern():
    pattern = "abacabadabacaba"
    table = prefix_function(pattern)
    assert len(table) == len(pattern)
    assert table[0] == 0


@pytest.mark.parametrize("pattern", ["abacaba", "aaaa", "xyz", "aabaaab"])
def test_prefix_values_are_borders(pattern):
    for i, length in enumerate(prefix_function(pattern)):
        assert length <= i
        assert pattern[:length] == pattern[i + 1 - length : i + 1]


def test_prefix_function_empty():
    assert prefix_function("") == []


def test_search_classic_example():
    assert kmp_search("ABABDABACDABABCABAB", "ABABCABAB") == [10]


def test_search_overlapping():
    assert kmp_search("aaaa", "aa") == [0, 1, 2]


@pytest.mark.parametrize(
    "text,pattern",
    [
        ("abcabcabc", "abc"),
        ("mississippi", "issi"),
        ("the cat sat on the mat", "at"),
        ("aaaaab", "aab"),
        ("short", "much longer pattern"),
    ],
)
def test_search_finds_every_occurrence(text, pattern):
    found = kmp_search(text, pattern)
    expected = [i for i in range(len(text)) if text.startswith(pattern, i)]
    assert found == expected


def test_search_no_match():
    assert kmp_search("abcdef", "xyz") == []


def test_search_empty_pattern_rejected():
    with pytest.raises(ValueError):
        kmp_search("abc", "")


def test_describe_none():
    assert describe_matches([]) == "O padrao nao foi encontrado."


def test_describe_one():
    assert describe_matches([7]) == "O padrao foi encontrado no indice 7."


def test_describe_many():
    assert describe_matches([0, 2, 4]) == (
        "O padrao foi encontrado 3 vezes. Nos indices : 0, 2 e 4."
    )


def test_main_reports_matches(tmp_path, capsys):
    target = tmp_path / "texto.txt"
    target.write_text("abcabcab", encoding="utf-8")
    assert main([str(target), "abc"]) == 0
    out = capsys.readouterr().out
    assert "Arquivo aberto com sucesso..." in out
    assert describe_matches(kmp_search("abcabcab", "abc")) in out


def test_main_prompts_for_missing_arguments(tmp_path, capsys, monkeypatch):
    target = tmp_path / "texto.txt"
    target.write_text("hello world", encoding="utf-8")
    answers = iter([str(target), "world"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    assert describe_matches([6]) in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt"), "x"]) == 1
    assert "Arquivo inexistente.." in capsys.readouterr().out