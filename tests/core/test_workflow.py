"""Tests for UploadWorkflow orchestration."""

import pytest

from release_uploader.config.settings import UploadSettings
from release_uploader.core.workflow import NO_GLOB_MATCH_MESSAGE, UploadWorkflow
from release_uploader.domain.types import UploadStatus
from release_uploader.exceptions import GitHubAPIError, ReleaseLookupError


def make_settings(**overrides) -> UploadSettings:
    values = {"token": "", "file": "", "tag": "v1.0.0"}
    values.update(overrides)
    return UploadSettings(**values)


@pytest.mark.asyncio
async def test_single_file_uses_rendered_asset_name(
    registry, release_factory, sample_file
):
    """$tag in the template is replaced by the tag."""
    registry.published["v1.0.0"] = release_factory(1, "v1.0.0")
    settings = make_settings(file=str(sample_file), asset_name="out-$tag.bin")

    result = await UploadWorkflow(registry).run(settings)

    assert result.succeeded
    assert registry.calls_to("upload_asset")[0][2] == "out-v1.0.0.bin"
    assert result.browser_download_url.endswith("/new/out-v1.0.0.bin")


@pytest.mark.asyncio
async def test_single_file_defaults_to_basename(
    registry, release_factory, sample_file
):
    """Without a template the file's basename is used."""
    registry.published["v1.0.0"] = release_factory(1, "v1.0.0")

    result = await UploadWorkflow(registry).run(
        make_settings(file=str(sample_file))
    )

    assert [r.asset_name for r in result.results] == ["out.bin"]


@pytest.mark.asyncio
async def test_glob_uploads_each_match_and_skips_directories(
    registry, release_factory, tmp_path
):
    """Directories matched by the pattern are skipped."""
    registry.published["v1.0.0"] = release_factory(1, "v1.0.0")
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.txt").write_text("bb")
    (tmp_path / "c.txt").mkdir()

    result = await UploadWorkflow(registry).run(
        make_settings(file=str(tmp_path / "*.txt"), file_glob=True)
    )

    statuses = [(r.asset_name, r.status) for r in result.results]
    assert statuses == [
        ("a.txt", UploadStatus.UPLOADED),
        ("b.txt", UploadStatus.UPLOADED),
        ("c.txt", UploadStatus.SKIPPED),
    ]
    assert result.succeeded
    # Last URL-producing file wins
    assert result.browser_download_url.endswith("/new/b.txt")


@pytest.mark.asyncio
async def test_empty_glob_signals_failure(registry, release_factory, tmp_path):
    """No matches is a failure, not a crash."""
    registry.published["v1.0.0"] = release_factory(1, "v1.0.0")

    result = await UploadWorkflow(registry).run(
        make_settings(file=str(tmp_path / "*.zip"), file_glob=True)
    )

    assert result.failures == [NO_GLOB_MATCH_MESSAGE]
    assert result.results == []
    assert registry.calls_to("list_assets") == []


@pytest.mark.asyncio
async def test_failed_file_does_not_stop_the_run(
    registry, release_factory, tmp_path
):
    """An UploadError is recorded and later files are still uploaded."""
    registry.published["v1.0.0"] = release_factory(1, "v1.0.0")
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.txt").write_text("b")
    original_upload = registry.upload_asset
    attempts = []

    async def flaky_upload(upload_url, name, data, **kwargs):
        attempts.append(name)
        if name == "a.txt":
            raise GitHubAPIError("HTTP 500", status=500)
        return await original_upload(upload_url, name, data, **kwargs)

    registry.upload_asset = flaky_upload

    result = await UploadWorkflow(registry).run(
        make_settings(file=str(tmp_path / "*.txt"), file_glob=True)
    )

    assert attempts == ["a.txt", "b.txt"]
    assert [r.status for r in result.results] == [
        UploadStatus.FAILED,
        UploadStatus.UPLOADED,
    ]
    assert not result.succeeded
    assert "HTTP 500" in result.failures[0]
    assert result.browser_download_url.endswith("/new/b.txt")


@pytest.mark.asyncio
async def test_duplicate_reports_failure_and_existing_url(
    registry, release_factory, asset_factory, sample_file
):
    """Both halves of the duplicate contract reach the run result."""
    release = release_factory(1, "v1.0.0")
    registry.published["v1.0.0"] = release
    existing = asset_factory(9, "out.bin")
    registry.assets[release.id] = [existing]

    result = await UploadWorkflow(registry).run(
        make_settings(file=str(sample_file))
    )

    assert result.browser_download_url == existing.browser_download_url
    assert result.failures == ["An asset called out.bin already exists."]
    assert registry.calls_to("upload_asset") == []


@pytest.mark.asyncio
async def test_resolve_failure_aborts_run(registry, sample_file):
    """Release lookup errors propagate out of the workflow."""
    registry.fail_on["get_release_by_tag"] = GitHubAPIError("HTTP 401")

    with pytest.raises(ReleaseLookupError):
        await UploadWorkflow(registry).run(make_settings(file=str(sample_file)))

    assert registry.calls_to("list_assets") == []


@pytest.mark.asyncio
async def test_release_is_created_with_settings(registry, sample_file):
    """Prerelease, name and body flow into release creation."""
    settings = make_settings(
        file=str(sample_file),
        prerelease=True,
        release_name="First",
        body="Initial release",
    )

    result = await UploadWorkflow(registry).run(settings)

    assert registry.calls_to("create_release") == [
        ("create_release", "v1.0.0", True, "First", "Initial release")
    ]
    assert result.release.tag_name == "v1.0.0"


@pytest.mark.asyncio
async def test_missing_single_file_fails_the_run(
    registry, release_factory, tmp_path
):
    """A mistyped file path is a failure, not a silent skip."""
    registry.published["v1.0.0"] = release_factory(1, "v1.0.0")

    result = await UploadWorkflow(registry).run(
        make_settings(file=str(tmp_path / "dist" / "typo.tar.gz"))
    )

    assert [r.status for r in result.results] == [UploadStatus.FAILED]
    assert not result.succeeded
    assert "typo.tar.gz" in result.failures[0]
    assert result.browser_download_url == ""
    assert registry.calls_to("list_assets") == []
