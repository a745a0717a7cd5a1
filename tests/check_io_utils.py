# check_io_utils.py
# Run with: python3 run_tests.py   (or pytest)
import os
import sys
import tempfile

from io_utils import RequestError, check_output_path, parse_request, read_request, write_table

def expect_request_error(fn, must_contain):
    try:
        fn()
    except RequestError as e:
        assert must_contain in str(e), f"error missing '{must_contain}': {e}"
        return
    raise AssertionError("expected RequestError, got success")

def test_parse_request():
    text = "# comment\n\ninputs: p, q\nOutputs : !p+q, !(p.q)\nstyle: T/F\n"
    assert parse_request(text) == {"inputs": "p, q", "outputs": "!p+q, !(p.q)", "style": "T/F"}

def test_partial_request():
    assert parse_request("inputs: p") == {"inputs": "p"}
    assert parse_request("") == {}

def test_bad_lines():
    expect_request_error(lambda: parse_request("inputs p, q"), "Line 1: expected 'key: value'")
    expect_request_error(lambda: parse_request("colour: red"), "unknown key 'colour'")
    expect_request_error(lambda: parse_request("inputs: p\ninputs: q"), "Line 2: 'inputs' given more than once")

def test_read_request_round_trip():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "req.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("inputs: a\noutputs: !a\n")
        assert read_request(path) == {"inputs": "a", "outputs": "!a"}
    expect_request_error(lambda: read_request(os.path.join("no", "such", "file.txt")), "not found")

def test_output_path_rules():
    with tempfile.TemporaryDirectory() as td:
        check_output_path(os.path.join(td, "t.md"))
        expect_request_error(lambda: check_output_path(os.path.join(td, "t.txt")), ".md")
        expect_request_error(lambda: check_output_path(os.path.join(td, "missing", "t.md")), "does not exist")
        path = os.path.join(td, "t.MD")
        write_table(path, "| p |\n")
        with open(path, encoding="utf-8") as f:
            assert f.read() == "| p |\n"

def run_all():
    tests = [
        test_parse_request,
        test_partial_request,
        test_bad_lines,
        test_read_request_round_trip,
        test_output_path_rules,
    ]
    passed = 0
    for t in tests:
        try:
            t()
            print(f"[PASS] {t.__name__}")
            passed += 1
        except Exception as e:
            print(f"[FAIL] {t.__name__}: {e}")
    total = len(tests)
    print(f"\n[SUMMARY] {passed} passed, {total - passed} failed (total {total})")
    return passed == total

if __name__ == "__main__":
    sys.exit(0 if run_all() else 1)
