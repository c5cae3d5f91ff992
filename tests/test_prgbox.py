from tuidialog.prgbox import popen_merged, prgbox
from tuidialog.progressbox import EXIT_OK


def test_popen_merges_stderr():
    with popen_merged("echo hi; echo oops 1>&2") as proc:
        output = proc.stdout.read()
    assert "hi" in output
    assert "oops" in output


def test_popen_exit_status():
    with popen_merged("exit 3") as proc:
        proc.stdout.read()
    assert proc.returncode == 3


def test_prgbox_shows_output():
    box = prgbox("printf 'a\\nb\\n'", 10, 40, False)
    assert box.lines[:2] == ["a", "b"]
    assert box.result == EXIT_OK


def test_prgbox_scrolls_long_output():
    box = prgbox("for i in 1 2 3 4 5 6; do echo $i; done", 5, 40, False)
    assert box.lines == ["4", "5", "6"]
    assert box.history == ["1", "2", "3", "4", "5", "6"]


def test_prgbox_reports_shell_errors():
    box = prgbox("no_such_command_for_tests_xyz", 10, 200, False)
    assert "no_such_command_for_tests_xyz" in box.history[0]