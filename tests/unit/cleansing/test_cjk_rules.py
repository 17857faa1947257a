"""Unit tests for the CJK width normalizer and the Kana fix-up rules."""

import pytest

from text_commonizer.cleansing.rules.cjk_rules import (
    CJK_WIDTH_NORMALIZER,
    COMPOSE_VOICED_W_KATAKANA,
    EXPAND_VOICED_W_KATAKANA,
)


@pytest.mark.unit
class TestCjkWidthNormalizer:
    def test_fullwidth_ascii_folds_to_halfwidth(self):
        assert CJK_WIDTH_NORMALIZER.replace_all("ＡＢＣ１２３") == "ABC123"

    def test_halfwidth_katakana_composes_voiced_marks(self):
        assert CJK_WIDTH_NORMALIZER.replace_all("ｶﾞｷﾞｸﾞ") == "ガギグ"
        assert CJK_WIDTH_NORMALIZER.replace_all("ﾊﾟﾋﾟ") == "パピ"

    def test_spacing_voiced_mark_composes_with_kana(self):
        assert CJK_WIDTH_NORMALIZER.replace_all("か゛") == "が"
        assert CJK_WIDTH_NORMALIZER.replace_all("は ゜") == "ぱ"

    def test_halfwidth_mark_after_space_composes(self):
        assert CJK_WIDTH_NORMALIZER.replace_all("\uff76 \uff9e") == "\u30ac"
        assert CJK_WIDTH_NORMALIZER.replace_all("\uff8a \uff9f") == "\u30d1"

    def test_orphan_marks_become_spacing_forms(self):
        assert CJK_WIDTH_NORMALIZER.replace_all("a\u3099") == "a゛"
        assert CJK_WIDTH_NORMALIZER.replace_all("ﾟ") == "゜"

    def test_dashes_fold_to_hyphen(self):
        assert CJK_WIDTH_NORMALIZER.replace_all("a‐b‑c‒d") == "a-b-c-d"

    @pytest.mark.parametrize("symbol", ["＄", "～", "￠", "￡", "￥", "￦"])
    def test_fullwidth_currency_symbols_are_kept(self, symbol):
        assert CJK_WIDTH_NORMALIZER.replace_all(f"ＡＢ{symbol}１") == f"AB{symbol}1"

    def test_ideographs_untouched(self):
        assert CJK_WIDTH_NORMALIZER.replace_all("漢字テスト") == "漢字テスト"

    def test_repeated_runs_replaced_in_place(self):
        assert CJK_WIDTH_NORMALIZER.replace_all("ｱ-ｱ ｱ") == "ア-ア ア"

    def test_none_and_empty(self):
        assert CJK_WIDTH_NORMALIZER.replace_all(None) is None
        assert CJK_WIDTH_NORMALIZER.replace_all("") == ""

    def test_matches_and_find(self):
        assert CJK_WIDTH_NORMALIZER.matches("ＡＢ") is True
        assert CJK_WIDTH_NORMALIZER.matches("plain ascii") is False
        assert CJK_WIDTH_NORMALIZER.find("a‐bｱｲ") == ["‐", "ｱｲ"]

    def test_priority(self):
        assert CJK_WIDTH_NORMALIZER.priority == 100000


@pytest.mark.unit
class TestVoicedWKatakanaRules:
    def test_expand(self):
        assert EXPAND_VOICED_W_KATAKANA.replace_all("ヷヸヹヺ") == (
            "わ゛ゐ゛ゑ゛を゛"
        )

    def test_compose(self):
        assert COMPOSE_VOICED_W_KATAKANA.replace_all(
            "ワ゛ヰ゛ヱ゛ヲ゛"
        ) == "ヷヸヹヺ"

    def test_compose_ignores_other_kana(self):
        assert COMPOSE_VOICED_W_KATAKANA.replace_all("カ゛") == "カ゛"
