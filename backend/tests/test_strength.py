"""Tests for password strength scoring."""

from formguard.validators import score_password


class TestScorePassword:
    def test_all_checks_pass(self):
        strength = score_password("Abcdef1!")
        assert strength.score == 5
        assert strength.checks.length is True
        assert strength.checks.uppercase is True
        assert strength.checks.lowercase is True
        assert strength.checks.number is True
        assert strength.checks.special is True

    def test_lowercase_only(self):
        strength = score_password("abcdefgh")
        assert strength.score == 2
        assert strength.checks.length is True
        assert strength.checks.lowercase is True
        assert strength.checks.uppercase is False

    def test_short_lowercase_scores_one(self):
        strength = score_password("abc")
        assert strength.score == 1
        assert strength.checks.length is False

    def test_empty_password(self):
        strength = score_password("")
        assert strength.score == 0
        assert not any(strength.checks.model_dump().values())

    def test_space_counts_as_special(self):
        assert score_password("a b").checks.special is True

    def test_non_ascii_letter_counts_as_special(self):
        assert score_password("é").checks.special is True

    def test_custom_min_length(self):
        assert score_password("Ab1!", min_length=4).checks.length is True
        assert score_password("Ab1!").checks.length is False

    def test_score_is_count_of_checks(self):
        for pwd in ["", "a", "A", "1", "!", "Aa", "Aa1", "Aa1!", "Aa1!aaaa", "aaaaaaaa"]:
            strength = score_password(pwd)
            assert strength.score == sum(strength.checks.model_dump().values())

    def test_adding_missing_class_never_lowers_score(self):
        base = "abcdefg"
        before = score_password(base).score
        for extra in ["A", "1", "!", "x"]:
            assert score_password(base + extra).score >= before

    def test_deterministic(self):
        assert score_password("Passw0rd!") == score_password("Passw0rd!")
