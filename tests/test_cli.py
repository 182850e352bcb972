"""Tests for the click command line."""

import click
import pytest
from click.testing import CliRunner

from abelian.cli import main, parse_quotient
from abelian.core.group import Element, Group


@pytest.fixture
def runner():
    return CliRunner()


class TestParseQuotient:
    def test_group_and_generator(self):
        group, generator = parse_quotient(("4", "2", "mod", "1", "0"))
        assert group == Group([4, 2])
        assert generator == Element((1, 0))

    def test_generator_optional(self):
        group, generator = parse_quotient(("2", "2"), require_generator=False)
        assert group == Group([2, 2])
        assert generator is None

    @pytest.mark.parametrize("args", [
        ("4", "2"),
        ("mod", "1"),
        ("4", "2", "mod", "1"),
        ("4", "x", "mod", "1", "0"),
        ("0", "mod", "0"),
        ("4", "2", "mod", "4", "0"),
    ])
    def test_rejects(self, args):
        with pytest.raises(click.UsageError):
            parse_quotient(args)


class TestCommands:
    def test_classify(self, runner):
        result = runner.invoke(main, ["classify", "4", "2", "mod", "1", "0"])
        assert result.exit_code == 0, result.output
        assert "Possible Isomorphic Groups" in result.output
        assert "is isomorphic to" in result.output
        assert "(Z_2)" in result.output

    def test_classify_show_cosets(self, runner):
        result = runner.invoke(main, ["classify", "4", "2", "mod", "1", "0", "--show-cosets"])
        assert result.exit_code == 0, result.output
        assert "Cosets" in result.output

    def test_classify_usage_error(self, runner):
        result = runner.invoke(main, ["classify", "4", "2", "1", "0"])
        assert result.exit_code == 2

    def test_classify_out_of_range(self, runner):
        result = runner.invoke(main, ["classify", "4", "2", "mod", "5", "0"])
        assert result.exit_code == 2
        assert "component 0" in result.output

    def test_classify_search_limit(self, runner):
        result = runner.invoke(main, ["classify", "4", "2", "mod", "1", "0", "--max-order", "4"])
        assert result.exit_code == 1
        assert "SearchLimitExceeded" in result.output

    def test_candidates_unpruned(self, runner):
        result = runner.invoke(main, ["candidates", "2", "2", "mod", "0", "0", "--no-prune"])
        assert result.exit_code == 0, result.output
        assert "(Z_4)" in result.output
        assert "(Z_2 x Z_2)" in result.output

    def test_orders_quotient(self, runner):
        result = runner.invoke(main, ["orders", "4", "2", "mod", "1", "0"])
        assert result.exit_code == 0, result.output
        assert "Total: 2" in result.output

    def test_orders_closed_form(self, runner):
        result = runner.invoke(main, ["orders", "2", "2", "--closed-form"])
        assert result.exit_code == 0, result.output
        assert "Total: 4" in result.output

    def test_orders_closed_form_rejects_generator(self, runner):
        result = runner.invoke(main, ["orders", "2", "2", "mod", "0", "0", "--closed-form"])
        assert result.exit_code == 2

    def test_cosets(self, runner):
        result = runner.invoke(main, ["cosets", "4", "2", "mod", "1", "0"])
        assert result.exit_code == 0, result.output
        assert "(0,1)" in result.output

    def test_verbose(self, runner):
        result = runner.invoke(main, ["--verbose", "classify", "6", "4", "mod", "2", "2"])
        assert result.exit_code == 0, result.output
