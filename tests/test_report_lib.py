"""Tests for the text renderer and colour helpers."""

from colorist import Color

from color import colorEnabled, colored, coloredHex, str2Color
from combination import target
from gen_funcs import calcF2Probs
from match_lib import filterCombinations
from report_lib import fmtTotal, resultsStr, tableStr


def render(mother, father, targets=(), tot_pop=64, **kwargs):
    combs = calcF2Probs(mother, father, tot_pop)
    filtered, summ = filterCombinations(combs, list(targets))
    return resultsStr(mother, father, tot_pop, list(targets), combs, filtered, summ, **kwargs)


class TestResultsStr:
    """Tests for the full report."""

    def test_lists_every_combination(self, round_mother, mutant_father):
        """Title, population and each combination's lines."""
        out = render(round_mother, mutant_father, use_color=False)
        assert "F2 Generation Probabilities for Mother × Father" in out
        assert "Total plants: 64" in out
        assert "3/4 (75.0%) = Round" in out
        assert "    Genotype: L_" in out
        assert "    Expected number of plants: 48.0" in out
        assert "1/4 (25.0%) = Mutant" in out
        assert "    Expected number of plants: 16.0" in out

    def test_no_targets_hides_target_sections(self, round_mother, mutant_father):
        """Without targets there is no summary and nothing is starred."""
        out = render(round_mother, mutant_father, use_color=False)
        assert "Target traits" not in out
        assert "Target Traits Summary" not in out
        assert "★" not in out
        assert "All Possible Combinations:" in out

    def test_target_sections(self, dihybrid):
        """Targets add the matching list, the summary and stars."""
        out = render(*dihybrid, targets=[target("ll", "Mutant"), target("cc", "Purple")], use_color=False)
        assert "- Mutant (ll)" in out
        assert "- Purple (cc)" in out
        assert "Matching Combinations:" in out
        assert "Total Probability: 1/16" in out
        assert "Percentage: 6.2%" in out or "Percentage: 6.3%" in out
        assert "Expected Total Plants with Target Traits: 4.0" in out
        assert out.count("★ Matches target traits") == 1

    def test_matching_combinations_come_before_full_list(self, dihybrid):
        """The filtered view is rendered above the full list."""
        out = render(*dihybrid, targets=[target("ll", "Mutant")], use_color=False)
        assert out.index("Matching Combinations:") < out.index("All Possible Combinations:")
        assert out.count("★ Matches target traits") == 2

    def test_unit_is_configurable(self, round_mother, mutant_father):
        """The noun for individuals can be changed."""
        out = render(round_mother, mutant_father, targets=[target("ll")], unit="flies", use_color=False)
        assert "Total flies: 64" in out
        assert "Expected number of flies: 48.0" in out
        assert "Expected Total Flies with Target Traits: 16.0" in out

    def test_goodness_of_fit_block(self, seeds):
        """A fit result adds its own block."""
        out = render(*seeds, tot_pop=556, fit=(0.47, 0.9254, 3), use_color=False)
        assert "Goodness of Fit:" in out
        assert "Chi-square: 0.47 (3 degrees of freedom)" in out
        assert "p-value: 0.9254" in out

    def test_color_codes(self, round_mother, mutant_father):
        """Colour adds escape codes, no colour leaves none."""
        assert "\033[" in render(round_mother, mutant_father, use_color=True)
        assert "\033[" not in render(round_mother, mutant_father, use_color=False)


class TestTableStr:
    """Tests for the tabular report."""

    def test_table(self, dihybrid):
        """One row per combination plus the target line."""
        combs = calcF2Probs(*dihybrid, 64)
        targets = [target("ll", "Mutant")]
        _, summ = filterCombinations(combs, targets)
        out = tableStr(*dihybrid, 64, targets, combs, summ)
        assert "phenotype" in out
        assert "Mutant, Purple" in out
        assert "ll cc" in out
        assert "Targets: Mutant (ll)" in out
        assert "Matched: 4/16 (25.0%), expected plants: 16.0" in out
        assert "\033[" not in out


class TestColor:
    """Tests for the colour helpers."""

    def test_colored_off_returns_text(self):
        assert colored("x", Color.RED, bold=True, use_color=False) == "x"
        assert coloredHex("x", use_color=False) == "x"

    def test_colored_wraps_text(self):
        out = colored("x", Color.RED)
        assert out.startswith(str(Color.RED))
        assert "x" in out

    def test_str2color_is_consistent(self):
        assert str2Color("Round") == str2Color("Round")
        assert str2Color("Round").startswith("#")
        assert len(str2Color("Round")) == 7

    def test_no_color_env(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert colorEnabled(True) is False
        monkeypatch.delenv("NO_COLOR")
        assert colorEnabled(True) is True
        assert colorEnabled(False) is False

    def test_fmt_total(self):
        assert fmtTotal(64) == "64"
        assert fmtTotal(64.0) == "64"
        assert fmtTotal(10.5) == "10.5"
