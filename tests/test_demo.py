"""
Tests for the demonstration program.
"""

from pymatrix.demo import main


def test_demo_output(capsys):
    main()
    out = capsys.readouterr().out
    expected = "\n".join([
        "[1, 1, 1, 1]",
        "[1, 1, 1, 1]",
        "[1, 1, 1, 1]",
        "[4, 4, 4, 4]",
        "[8, 8, 8, 8]",
        "[8, 8, 8, 8]",
        "[16, 16, 16, 16]",
        "[4, 8]",
        "[4, 8]",
        "[4, 8]",
        "[4, 8]",
    ]) + "\n"
    assert out == expected
