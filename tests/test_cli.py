"""Tests for the fib command line."""
import ast

from fibtools.cli import main


def test_cli_nth_term(capsys):
    assert main(["10"]) == 0
    assert capsys.readouterr().out.strip() == "55"


def test_cli_no_fast_same_answer(capsys):
    main(["300"])
    fast = capsys.readouterr().out
    main(["300", "--no-fast"])
    assert capsys.readouterr().out == fast


def test_cli_list(capsys):
    assert main(["4", "--init", "0,1", "--list"]) == 0
    assert ast.literal_eval(capsys.readouterr().out.strip()) == [0, 1, 1, 2, 3, 5]


def test_cli_tribonacci_mod(capsys):
    assert main(["10", "-i", "0,0,1", "-k", "3", "-m", "1000"]) == 0
    # 0, 0, 1, 1, 2, 4, 7, 13, 24, 44
    assert capsys.readouterr().out.strip() == "44"


def test_cli_custom_func(capsys):
    assert main(["10", "-f", "a b +"]) == 0
    assert capsys.readouterr().out.strip() == "55"


def test_cli_custom_func_seed_position(capsys):
    assert main(["1", "-i", "4,9", "-f", "a b +"]) == 0
    assert capsys.readouterr().out.strip() == "4"


def test_cli_init_length_error(capsys):
    assert main(["10", "-i", "1,1,1"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("error:")
    assert "n_params" in err


def test_cli_bad_func(capsys):
    assert main(["10", "-f", "a c +"]) == 2
    assert "error:" in capsys.readouterr().err


def test_cli_plot_requires_list(capsys):
    assert main(["10", "--plot"]) == 2
    assert "only use plot with list" in capsys.readouterr().err


def test_cli_bench_requires_zero(capsys):
    assert main(["10", "--bench", "0.01"]) == 2
    assert "set n to zero" in capsys.readouterr().err


def test_cli_bench(capsys):
    assert main(["0", "--bench", "0.01"]) == 0
    assert capsys.readouterr().out.startswith("Generated ")


def test_cli_prints_huge_term(capsys):
    assert main(["30000"]) == 0
    out = capsys.readouterr().out.strip()
    assert len(out) > 4300
    assert out.isdigit()
