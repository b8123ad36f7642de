"""
Conformance: multi-line payloads.

A test body may read further raw lines after its case.  Those lines are
consumed verbatim, whatever they look like, and case reading resumes after
them.  Test M reads as many raw lines as its case's first field says.
"""
import pytest


# Each test case is a tuple: (description, source, expected_recorded, applied, failed)
# expected_recorded maps test name -> case texts and raw lines, in read order.

CASES = [
    (
        "rows_after_case",
        ":M\n2\nrow1\nrow2\n1\nrow3\n",
        {"M": ["2", "row1", "row2", "1", "row3"]},
        2, 0,
    ),
    (
        "zero_rows",
        ":M\n0\n0\n",
        {"M": ["0", "0"]},
        2, 0,
    ),
    (
        "payload_lines_are_not_classified",
        ":M\n3\n:A\n// not skipped\n\n0\n",
        {"M": ["3", ":A", "// not skipped", "", "0"]},
        2, 0,
    ),
    (
        "payload_leading_whitespace_kept",
        ":M\n1\n   indented  \n",
        {"M": ["1", "   indented  "]},
        1, 0,
    ),
    (
        "payload_carriage_return_kept",
        ":M\r\n1\r\nrow\r\n",
        {"M": ["1", "row\r"]},
        1, 0,
    ),
    (
        "next_section_after_payload",
        ":M\n1\n:B\n:A\nx\n",
        {"M": ["1", ":B"], "A": ["x"]},
        2, 0,
    ),
    (
        "data_ends_inside_payload",
        ":M\n3\nonly\n",
        {"M": ["3", "only"]},
        1, 1,
    ),
    (
        "payload_swallows_marker",
        ":M\n2\n1\n:A\n:A\nx\n",
        {"M": ["2", "1", ":A"], "A": ["x"]},
        2, 0,
    ),
]


@pytest.mark.parametrize(
    "description,source,expected,applied,failed", CASES, ids=[c[0] for c in CASES]
)
def test_multiline_payloads(runner, description, source, expected, applied, failed):
    outcome = runner.run(source)
    assert outcome.cases == expected
    assert (outcome.applied, outcome.failed) == (applied, failed)


def test_short_payload_aborts_only_that_test(runner):
    outcome = runner.run(":M\n5\na\n")
    assert outcome.events == [
        "test M", "fail M[1]", "abort M", "footer M 1/1", "end 1/1",
    ]
