"""
Unit tests for repository construction.

Tests building references from URLs and working copies, the non-throwing
validate variant, and the 'svn info' cross-check against a working directory.
"""

from pathlib import Path

import pytest

from svnprovider.core.exceptions import (
    CommandExecutionFailed,
    InvalidRepositoryUrl,
    NotACheckout,
    NotADirectory,
    RepositoryResolutionFailed,
    ScmRepositoryError,
)
from svnprovider.core.models import InfoItem, InfoScmResult, ScmOperation
from svnprovider.core.settings import SvnProviderSettings, set_settings
from svnprovider.provider.factory import FROM_SETTINGS

URL = "https://svn.example.org/repo/trunk"


@pytest.fixture
def checkout(tmp_path: Path) -> Path:
    """A directory that looks like an svn working copy."""
    wc = tmp_path / "wc"
    (wc / ".svn").mkdir(parents=True)
    return wc


def info_reporting(stub_command, *urls):
    items = [InfoItem(path=".")] + [InfoItem(url=u) for u in urls]
    return stub_command(InfoScmResult(success=True, info_items=items, command_output="Path: ."))


class TestFromUrl:
    """Tests for make_provider_repository without a working directory check."""

    def test_valid_url(self, provider):
        repo = provider.make_provider_repository(URL)
        assert repo.url == URL

    def test_round_trip_is_verbatim(self, provider):
        url = "svn+ssh://host//odd/Path/"
        assert provider.make_provider_repository(url).url == url

    def test_invalid_url_raises_with_messages(self, provider):
        with pytest.raises(InvalidRepositoryUrl) as exc_info:
            provider.make_provider_repository("file:/repo")

        err = exc_info.value
        assert err.validation_messages == [
            "A svn 'file' url must be on the form 'file://[hostname]/'."
        ]
        assert err.message == "The scm url is invalid."
        assert isinstance(err, ScmRepositoryError)

    def test_tunnel_from_provider_settings(self, provider):
        assert provider.make_provider_repository("svn+foo://host/repo").tunnel == "foo"

    def test_undefined_tunnel(self, provider):
        with pytest.raises(InvalidRepositoryUrl) as exc_info:
            provider.make_provider_repository("svn+bar://host/repo")
        assert exc_info.value.validation_messages == [
            "The tunnel 'bar' isn't defined in your subversion configuration file."
        ]

    def test_info_not_run_without_working_directory(self, provider):
        provider.make_provider_repository(URL)
        assert provider.stubs[ScmOperation.INFO].calls == []


class TestValidate:
    """Tests for the non-throwing validate_scm_url variant."""

    def test_valid(self, provider):
        assert provider.validate_scm_url(URL) == []

    def test_invalid(self, provider):
        assert provider.validate_scm_url("nonsense") == ["nonsense url isn't a valid svn URL."]

    def test_info_failure_reported_as_message(self, make_provider, stub_command):
        provider = make_provider(
            commands={ScmOperation.INFO: stub_command(error=CommandExecutionFailed("boom"))}
        )
        set_settings(SvnProviderSettings(current_working_directory="/work"))

        assert provider.validate_scm_url(URL) == ["An error occurred while trying to svn info"]


class TestWorkingDirectoryCrossCheck:
    """Tests for reconciling a URL with 'svn info' of the current directory."""

    def test_matching_url_passes(self, make_provider, stub_command, tmp_path):
        info = info_reporting(stub_command, URL)
        provider = make_provider(commands={ScmOperation.INFO: info})

        repo = provider.make_provider_repository(URL, current_working_directory=str(tmp_path))

        assert repo.url == URL
        (info_repo, info_file_set, _), = info.calls
        assert info_repo.url == URL
        assert info_file_set.basedir == tmp_path

    def test_mismatch_raises(self, make_provider, stub_command, tmp_path):
        other = "https://svn.example.org/repo/branches/old"
        provider = make_provider(
            commands={ScmOperation.INFO: info_reporting(stub_command, other, URL)}
        )

        with pytest.raises(InvalidRepositoryUrl) as exc_info:
            provider.make_provider_repository(URL, current_working_directory=str(tmp_path))

        assert exc_info.value.validation_messages == [
            "Scm url does not match the value returned by svn info "
            f"('{other}' vs. '{URL}')"
        ]

    def test_no_url_in_info_passes(self, make_provider, stub_command, tmp_path):
        provider = make_provider(commands={ScmOperation.INFO: info_reporting(stub_command)})
        assert provider.make_provider_repository(URL, current_working_directory=str(tmp_path))

    def test_uses_process_wide_setting(self, make_provider, stub_command, tmp_path):
        info = info_reporting(stub_command, "svn://elsewhere/repo")
        provider = make_provider(commands={ScmOperation.INFO: info})
        set_settings(SvnProviderSettings(current_working_directory=str(tmp_path)))

        assert provider.validate_scm_url(URL) == [
            "Scm url does not match the value returned by svn info "
            f"('svn://elsewhere/repo' vs. '{URL}')"
        ]
        assert len(info.calls) == 1

    def test_setting_read_from_environment(
        self, make_provider, stub_command, tmp_path, monkeypatch
    ):
        monkeypatch.setenv("SVNPROVIDER_CURRENT_WORKING_DIRECTORY", str(tmp_path))
        info = info_reporting(stub_command, URL)
        provider = make_provider(commands={ScmOperation.INFO: info})

        provider.make_provider_repository(URL)

        assert len(info.calls) == 1

    def test_path_object_accepted(self, make_provider, stub_command, tmp_path):
        info = info_reporting(stub_command, URL)
        provider = make_provider(commands={ScmOperation.INFO: info})

        provider.make_provider_repository(URL, current_working_directory=tmp_path)

        assert info.calls[0][1].basedir == tmp_path

    def test_explicit_default_marker_reads_settings(self, make_provider, stub_command, tmp_path):
        info = info_reporting(stub_command, URL)
        provider = make_provider(commands={ScmOperation.INFO: info})
        set_settings(SvnProviderSettings(current_working_directory=str(tmp_path)))

        provider.repository_factory.from_url(URL, FROM_SETTINGS)

        assert len(info.calls) == 1

    def test_explicit_none_skips_check(self, make_provider, stub_command, tmp_path):
        info = info_reporting(stub_command, "svn://elsewhere/repo")
        provider = make_provider(commands={ScmOperation.INFO: info})
        set_settings(SvnProviderSettings(current_working_directory=str(tmp_path)))

        assert provider.make_provider_repository(URL, current_working_directory=None).url == URL
        assert info.calls == []

    def test_invalid_url_skips_check(self, make_provider, stub_command, tmp_path):
        info = info_reporting(stub_command, "svn://elsewhere/repo")
        provider = make_provider(commands={ScmOperation.INFO: info})

        with pytest.raises(InvalidRepositoryUrl) as exc_info:
            provider.make_provider_repository("svn:/bad", current_working_directory=str(tmp_path))

        assert len(exc_info.value.validation_messages) == 1
        assert info.calls == []

    def test_info_failure_raises_resolution_error(self, make_provider, stub_command, tmp_path):
        error = CommandExecutionFailed("svn: E155007: not a working copy")
        provider = make_provider(commands={ScmOperation.INFO: stub_command(error=error)})

        with pytest.raises(RepositoryResolutionFailed) as exc_info:
            provider.make_provider_repository(URL, current_working_directory=str(tmp_path))

        assert exc_info.value.__cause__ is error


class TestFromWorkingDirectory:
    """Tests for make_provider_repository_from_path."""

    def test_file_is_not_a_directory(self, provider, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x")

        with pytest.raises(NotADirectory) as exc_info:
            provider.make_provider_repository_from_path(path)

        assert str(path.absolute()) in str(exc_info.value)
        assert str(exc_info.value).endswith("isn't a valid directory.")

    def test_missing_path_is_not_a_directory(self, provider, tmp_path):
        with pytest.raises(NotADirectory):
            provider.make_provider_repository_from_path(tmp_path / "missing")

    def test_directory_without_marker(self, provider, tmp_path):
        plain = tmp_path / "plain"
        plain.mkdir()

        with pytest.raises(NotACheckout) as exc_info:
            provider.make_provider_repository_from_path(plain)

        assert str(exc_info.value) == f"{plain.absolute()} isn't a svn checkout directory."

    def test_checkout_resolves_url(self, make_provider, checkout):
        provider = make_provider(urls_by_path={checkout: URL})

        repo = provider.make_provider_repository_from_path(str(checkout))

        assert repo.url == URL

    def test_resolver_failure_is_wrapped(self, make_provider, checkout):
        provider = make_provider(urls_by_path={})

        with pytest.raises(RepositoryResolutionFailed) as exc_info:
            provider.make_provider_repository_from_path(checkout)

        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_resolved_url_is_validated(self, make_provider, checkout):
        provider = make_provider(urls_by_path={checkout: "svn+bar://host/repo"})

        with pytest.raises(InvalidRepositoryUrl):
            provider.make_provider_repository_from_path(checkout)
