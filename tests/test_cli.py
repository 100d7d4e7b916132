from pathlib import Path

from click.testing import CliRunner

from randq.cli import iter_tokens, randq_cli
from randq.utils import load_stats

TOKENS = "AA BB BB BB BB BB CC CC\nDD EE  FF\n\nGG HH II"


def test_iter_tokens() -> None:
    assert list(iter_tokens(["a b\n", "\n", "  c\td \n"])) == ["a", "b", "c", "d"]


def test_permutation_prints_k_tokens() -> None:
    runner = CliRunner()
    result = runner.invoke(randq_cli, ["--seed", "1", "permutation", "3"], input=TOKENS)
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert len(lines) == 3
    assert set(lines) <= set(TOKENS.split())


def test_permutation_k_exceeds_input() -> None:
    runner = CliRunner()
    result = runner.invoke(randq_cli, ["permutation", "100"], input="a b c")
    assert result.exit_code == 0, result.output
    assert sorted(result.output.splitlines()) == ["a", "b", "c"]


def test_permutation_zero() -> None:
    runner = CliRunner()
    result = runner.invoke(randq_cli, ["permutation", "0"], input=TOKENS)
    assert result.exit_code == 0
    assert result.output == ""


def test_permutation_negative_is_usage_error() -> None:
    runner = CliRunner()
    result = runner.invoke(randq_cli, ["permutation", "--", "-1"], input=TOKENS)
    assert result.exit_code == 2


def test_permutation_seed_is_reproducible() -> None:
    runner = CliRunner()
    args = ["--seed", "7", "permutation", "4"]
    first = runner.invoke(randq_cli, args, input=TOKENS).output
    second = runner.invoke(randq_cli, args, input=TOKENS).output
    assert first == second


def test_permutation_input_file_and_logfile(tmp_path: Path) -> None:
    data = tmp_path.joinpath("tokens.txt")
    data.write_text(TOKENS)
    logfile = tmp_path.joinpath("stats.txt")
    runner = CliRunner()
    result = runner.invoke(
        randq_cli,
        ["--logfile", logfile.as_posix(), "permutation", "2", "--input", data.as_posix()],
    )
    assert result.exit_code == 0, result.output
    assert len(result.output.splitlines()) == 2
    stats = load_stats(logfile, name="reservoir")
    assert len(stats) == 1
    assert stats[0]["k"] == 2
    assert stats[0]["items_taken"] == 2
    assert stats[0]["items_seen"] == len(TOKENS.split()) - 2
