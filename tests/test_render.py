from weighing.render import format_pans, format_sequential, format_static, format_summary
from weighing.sequential import solve_sequential
from weighing.static import solve_static

TWELVE = """\
    ( 1  2  3  4 |  5  6  7  8) [8, 9, 8]
        +( 1  2  5 |  3  4  6) [3, 2, 3]
            +( 1 |  2) [1, 1, 1]  1+,  6-,  2+
            =( 7 |  8) [1, 0, 1]  8-,  --,  7-
            -( 3 |  4) [1, 1, 1]  3+,  5-,  4+
        =( 9 10 | 11  1) [3, 3, 3]
            +( 9 | 10) [1, 1, 1]  9+, 11-, 10+
            =(12 |  1) [1, 1, 1] 12+,  ==, 12-
            -(11  9 |  1  2) [1, 1, 1] 11+, 10-,  9-
        -( 5  6  1 |  7  8  2) [3, 2, 3]
            +( 5 |  6) [1, 1, 1]  5+,  2-,  6+
            =( 3 |  4) [1, 0, 1]  4-,  --,  3-
            -( 7 |  8) [1, 1, 1]  7+,  1-,  8+"""

THREE_STATIC = """\
 1  2  3

+
 0  2  1
 1  2  0
-
 0  1  2
 2  1  0

( 3 |  2)
( 1 |  2)"""


def test_twelve_coin_tree_listing():
    assert format_sequential(solve_sequential(12)) == TWELVE


def test_three_coin_static_listing():
    assert format_static(solve_static(3)) == THREE_STATIC


def test_pans_and_summary():
    assert format_pans((12,), (1,)) == "(12 |  1)"
    assert format_pans((1, 2), (3, 4)) == "( 1  2 |  3  4)"
    assert format_summary(3, 0.4) == "Required 3 weighings. Time: 0 seconds."
