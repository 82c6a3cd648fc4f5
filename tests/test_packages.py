"""Tests for the package-count aggregator."""

import threading
from pathlib import Path

from core.packages import (
    ENUMERATION_FAILED,
    EXECUTION_FAILED,
    OK,
    PACKAGE_SOURCES,
    UNAVAILABLE,
    CommandSource,
    DirectorySource,
    collect_outcomes,
    count_command_source,
    count_directory_source,
    count_packages,
    eligible_sources,
)


class FakeRunner:
    """Records invocations and replies with canned (code, stdout, stderr)."""

    def __init__(self, replies=None, default=(0, "", "")):
        self.replies = replies or {}
        self.default = default
        self.calls = []
        self._lock = threading.Lock()

    def __call__(self, argv):
        with self._lock:
            self.calls.append(list(argv))
        return self.replies.get(argv[0], self.default)


def which_all(name):
    return f"/usr/bin/{name}"


def which_none(name):
    return None


def make_files(directory: Path, n: int) -> None:
    directory.mkdir(parents=True)
    for i in range(n):
        (directory / f"file{i}").write_text("x")


def test_command_output_counts_lines_minus_one() -> None:
    source = CommandSource("pacman", r"(?i)^arch", "pacman", ("-Q",))
    runner = FakeRunner({"pacman": (0, "a\nb\nc\n", "")})

    outcome = count_command_source(source, runner, which_all)

    assert outcome.count == 3
    assert outcome.reason == OK
    assert runner.calls == [["pacman", "-Q"]]


def test_command_output_without_trailing_newline_undercounts() -> None:
    source = CommandSource("rpm", r"(?i)^fedora", "rpm", ("-qa",))
    runner = FakeRunner({"rpm": (0, "a\nb\nc", "")})

    assert count_command_source(source, runner, which_all).count == 2


def test_empty_command_output_counts_zero() -> None:
    source = CommandSource("apk", r"(?i)^alpine", "apk", ("info",))

    assert count_command_source(source, FakeRunner(), which_all).count == 0


def test_missing_executable_is_never_run() -> None:
    source = CommandSource("pacman", r"(?i)^arch", "pacman", ("-Q",))
    runner = FakeRunner({"pacman": (0, "a\nb\n", "")})

    outcome = count_command_source(source, runner, which_none)

    assert outcome.count == 0
    assert outcome.reason == UNAVAILABLE
    assert runner.calls == []


def test_failed_command_contributes_zero() -> None:
    source = CommandSource("zypper", r"(?i)^opensuse", "zypper", ("se", "-i"))
    runner = FakeRunner({"zypper": (1, "partial\noutput\n", "boom")})

    outcome = count_command_source(source, runner, which_all)

    assert outcome.count == 0
    assert outcome.reason == EXECUTION_FAILED


def test_directory_source_sums_across_matches(tmp_path: Path) -> None:
    make_files(tmp_path / "db" / "pkg-a", 3)
    make_files(tmp_path / "db" / "pkg-b", 5)
    source = DirectorySource("kiss", r"(?i)^kiss", (str(tmp_path / "db" / "*") + "/",))

    outcome = count_directory_source(source)

    assert outcome.count == 8
    assert outcome.reason == OK


def test_directory_source_counts_nested_files_not_directories(tmp_path: Path) -> None:
    make_files(tmp_path / "db" / "pkg" / "nested" / "deeper", 2)
    (tmp_path / "db" / "pkg" / "top").write_text("x")
    source = DirectorySource("portage", r"(?i)^portage", (str(tmp_path / "db" / "*") + "/",))

    assert count_directory_source(source).count == 3


def test_directory_source_sums_across_patterns(tmp_path: Path) -> None:
    make_files(tmp_path / "Cellar" / "git", 4)
    make_files(tmp_path / "Caskroom" / "firefox", 1)
    source = DirectorySource(
        "homebrew",
        r"(?i)^homebrew",
        (str(tmp_path / "Cellar" / "*") + "/", str(tmp_path / "Caskroom" / "*") + "/"),
    )

    assert count_directory_source(source).count == 5


def test_directory_source_glob_matching_plain_files(tmp_path: Path) -> None:
    packages = tmp_path / "packages"
    packages.mkdir()
    for name in ["bash-5.2", "coreutils-9.4", "glibc-2.39"]:
        (packages / name).write_text("PACKAGE NAME: x\n")
    source = DirectorySource("pkgtool", r"(?i)^pkgtool", (str(packages / "*"),))

    outcome = count_directory_source(source)

    assert outcome.count == 3
    assert outcome.reason == OK


def test_symlinked_directory_counts_as_one_entry(tmp_path: Path) -> None:
    make_files(tmp_path / "target", 4)
    make_files(tmp_path / "db" / "pkg", 2)
    (tmp_path / "db" / "pkg" / "link").symlink_to(tmp_path / "target", target_is_directory=True)
    source = DirectorySource("kiss", r"(?i)^kiss", (str(tmp_path / "db" / "*") + "/",))

    assert count_directory_source(source).count == 3


def test_directory_source_with_no_matches_counts_zero(tmp_path: Path) -> None:
    source = DirectorySource("eopkg", r"(?i)^eopkg", (str(tmp_path / "missing" / "*"),))

    outcome = count_directory_source(source)

    assert outcome.count == 0
    assert outcome.reason == OK


def test_walk_error_only_drops_the_failing_pattern(tmp_path: Path, monkeypatch) -> None:
    make_files(tmp_path / "good" / "pkg", 2)
    make_files(tmp_path / "bad" / "pkg", 7)
    bad_root = str(tmp_path / "bad")

    import core.packages as packages

    real_count_files = packages.count_files

    def flaky_count_files(path):
        if path.startswith(bad_root):
            raise PermissionError(path)
        return real_count_files(path)

    monkeypatch.setattr(packages, "count_files", flaky_count_files)
    source = DirectorySource(
        "kiss", r"(?i)^kiss", (str(tmp_path / "good" / "*") + "/", bad_root + "/*/")
    )

    outcome = count_directory_source(source)

    assert outcome.count == 2
    assert outcome.reason == ENUMERATION_FAILED


def test_eligibility_uses_search_and_exclusions() -> None:
    selected = eligible_sources("Debian GNU/Linux 12 (bookworm)", set())

    assert [s.identifier for s in selected] == ["dpkg-query"]
    assert eligible_sources("Debian GNU/Linux 12", {"dpkg-query"}) == []
    assert eligible_sources("my debian", set()) == []


def test_static_table_has_thirteen_sources() -> None:
    assert len(PACKAGE_SOURCES) == 13


def test_excluded_debian_source_is_never_invoked() -> None:
    runner = FakeRunner({"dpkg-query": (0, "a\nb\n", "")})

    total = count_packages("Debian GNU/Linux 12", {"dpkg-query"}, run_func=runner, which=which_all)

    assert total == 0
    assert runner.calls == []


def test_excluding_every_match_yields_zero() -> None:
    sources = (
        CommandSource("pacman", r"(?i)^arch", "pacman", ("-Q",)),
        CommandSource("rpm", r"(?i)arch", "rpm", ("-qa",)),
    )
    runner = FakeRunner(default=(0, "x\ny\n", ""))

    total = count_packages(
        "Arch Linux", {"pacman", "rpm"}, sources=sources, run_func=runner, which=which_all
    )

    assert total == 0
    assert runner.calls == []


def test_missing_executable_does_not_affect_other_sources(tmp_path: Path) -> None:
    make_files(tmp_path / "db" / "pkg", 4)
    sources = (
        CommandSource("pacman", r"(?i)^arch", "pacman", ("-Q",)),
        CommandSource("rpm", r"(?i)^arch", "rpm", ("-qa",)),
        DirectorySource("kiss", r"(?i)^arch", (str(tmp_path / "db" / "*") + "/",)),
    )
    runner = FakeRunner({"pacman": (0, "a\nb\n", ""), "rpm": (0, "c\nd\ne\n", "")})

    def which(name):
        return None if name == "pacman" else f"/usr/bin/{name}"

    outcomes = collect_outcomes("Arch Linux", set(), sources=sources, run_func=runner, which=which)
    by_id = {o.identifier: o for o in outcomes}

    assert by_id["pacman"].count == 0
    assert by_id["pacman"].reason == UNAVAILABLE
    assert by_id["rpm"].count == 3
    assert by_id["kiss"].count == 4
    assert count_packages("Arch Linux", set(), sources=sources, run_func=runner, which=which) == 7


def test_unexpected_exception_in_a_task_degrades_to_zero() -> None:
    sources = (
        CommandSource("pacman", r"(?i)^arch", "pacman", ("-Q",)),
        CommandSource("rpm", r"(?i)^arch", "rpm", ("-qa",)),
    )

    def runner(argv):
        if argv[0] == "pacman":
            raise RuntimeError("boom")
        return 0, "a\n", ""

    assert count_packages("Arch", set(), sources=sources, run_func=runner, which=which_all) == 1


def test_on_complete_called_once_per_eligible_source() -> None:
    sources = (
        CommandSource("pacman", r"(?i)^arch", "pacman", ("-Q",)),
        CommandSource("rpm", r"(?i)^arch", "rpm", ("-qa",)),
        CommandSource("apk", r"(?i)^alpine", "apk", ("info",)),
    )
    seen = []

    count_packages(
        "Arch", set(), sources=sources, run_func=FakeRunner(), which=which_all,
        on_complete=seen.append,
    )

    assert sorted(o.identifier for o in seen) == ["pacman", "rpm"]


def test_unknown_os_and_arbitrary_exclusions_return_zero() -> None:
    for os_name in ["", "Unknown OS", "Plan 9", "\x00weird"]:
        for excluded in [set(), {""}, {"pacman", "nonsense"}]:
            total = count_packages(os_name, excluded, run_func=FakeRunner(), which=which_all)
            assert isinstance(total, int)
            assert total == 0
