"""Tests for article text segmentation."""

import unicodedata

from wikiguessr.tokenizer import PunctuationToken, WordToken, tokenize


def _reconstruct(text: str) -> str:
    result = tokenize(text)
    parts = []
    for tok in result.tokens:
        if isinstance(tok, WordToken):
            parts.append(result.words[tok.index].display)
        else:
            parts.append(tok.text)
    return "".join(parts)


# ── words ─────────────────────────────────────────────────────────────────

class TestWords:
    def test_basic_sentence(self):
        result = tokenize("Paris est grand.")
        assert [w.display for w in result.words] == ["Paris", "est", "grand"]
        assert [w.normalized for w in result.words] == ["paris", "est", "grand"]

    def test_indices_dense_and_increasing(self):
        result = tokenize("Un, deux ; trois !\nquatre")
        word_tokens = [t for t in result.tokens if isinstance(t, WordToken)]
        assert [t.index for t in word_tokens] == [0, 1, 2, 3]
        assert [w.index for w in result.words] == [0, 1, 2, 3]

    def test_length_is_display_length(self):
        result = tokenize("Été 1838")
        word_tokens = [t for t in result.tokens if isinstance(t, WordToken)]
        assert [t.length for t in word_tokens] == [3, 4]

    def test_accented_letters_stay_in_word(self):
        result = tokenize("La locomotive à vapeur de Sèvres")
        assert "Sèvres" in [w.display for w in result.words]
        assert "à" in [w.display for w in result.words]

    def test_ligature_stays_in_word(self):
        result = tokenize("Son cœur")
        assert result.words[1].display == "cœur"
        assert result.words[1].normalized == "coeur"

    def test_apostrophe_splits(self):
        result = tokenize("l'industrie")
        assert [w.display for w in result.words] == ["l", "industrie"]

    def test_hyphen_splits(self):
        result = tokenize("franco-allemande")
        assert [w.display for w in result.words] == ["franco", "allemande"]

    def test_digits_are_words(self):
        result = tokenize("le 2 avril 1838")
        assert [w.display for w in result.words] == ["le", "2", "avril", "1838"]

    def test_multiplication_sign_is_not_a_letter(self):
        result = tokenize("3×4")
        assert [w.display for w in result.words] == ["3", "4"]

    def test_decomposed_accents_stay_in_word(self):
        text = unicodedata.normalize("NFD", "Un été à Cahors")
        result = tokenize(text)
        assert [w.normalized for w in result.words] == ["un", "ete", "a", "cahors"]
        assert _reconstruct(text) == text


# ── separators ────────────────────────────────────────────────────────────

class TestSeparators:
    def test_punctuation_and_space_are_separate_runs(self):
        result = tokenize("Hello, world!")
        texts = [t.text for t in result.tokens if isinstance(t, PunctuationToken)]
        assert texts == [",", " ", "!"]

    def test_each_newline_is_its_own_token(self):
        result = tokenize("a\n\nb")
        assert len(result.tokens) == 4
        assert [t.text for t in result.tokens[1:3]] == ["\n", "\n"]

    def test_newline_not_merged_with_spaces(self):
        result = tokenize("a \n b")
        texts = [t.text for t in result.tokens if isinstance(t, PunctuationToken)]
        assert texts == [" ", "\n", " "]

    def test_whitespace_run_kept_verbatim(self):
        result = tokenize("a  \t b")
        assert result.tokens[1].text == "  \t "

    def test_only_separators(self):
        result = tokenize("... !!!")
        assert result.words == ()
        assert all(isinstance(t, PunctuationToken) for t in result.tokens)

    def test_empty_string(self):
        result = tokenize("")
        assert result.tokens == ()
        assert result.words == ()


# ── ids and losslessness ──────────────────────────────────────────────────

class TestIdsAndReconstruction:
    def test_ids_count_every_token(self):
        result = tokenize("ab cd")
        assert [t.id for t in result.tokens] == ["w0", "p1", "w2"]

    def test_prefix(self):
        result = tokenize("ab cd", "s0c-")
        assert [t.id for t in result.tokens] == ["s0c-w0", "s0c-p1", "s0c-w2"]

    def test_ids_unique(self):
        result = tokenize("Il est l'une des figures, né en 1838.\n\nFin")
        ids = [t.id for t in result.tokens]
        assert len(ids) == len(set(ids))

    def test_lossless(self):
        samples = [
            "",
            "Léon Gambetta",
            "Il est l'une des figures majeures.\n\nAvocat de formation — il...",
            "  espaces\t\tet\r\nretours  ",
            "Αθήνα, 3×4 = 12 ; cœur & âme",
            "!!!",
        ]
        for text in samples:
            assert _reconstruct(text) == text

    def test_token_types(self):
        result = tokenize("a.")
        assert result.tokens[0].type == "word"
        assert result.tokens[1].type == "punct"
