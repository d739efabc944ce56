from infix_evaluator.parsing import locate_parenthesis


def test_single_group():
    assert locate_parenthesis("(1+2)") == [(0, 4)]


def test_groups_in_order():
    assert locate_parenthesis("(1+2)*(3)") == [(0, 4), (6, 8)]
    assert locate_parenthesis("(1)(2)") == [(0, 2), (3, 5)]


def test_nested_groups_report_only_outer_span():
    assert locate_parenthesis("((1)+(2))*3") == [(0, 8)]
    assert locate_parenthesis("1 + (2 * (3 - (4)))") == [(4, 18)]


def test_no_parenthesis():
    assert locate_parenthesis("") == []
    assert locate_parenthesis("1 + 2") == []


def test_unterminated_group_is_not_reported():
    assert locate_parenthesis("(1+2") == []
    assert locate_parenthesis("(1)+(2") == [(0, 2)]


def test_stray_closing_parenthesis_is_ignored():
    assert locate_parenthesis("1)+(2)") == []
    assert locate_parenthesis("(1))") == [(0, 2)]
