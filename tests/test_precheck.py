from __future__ import annotations

import pytest

from rootproject.app.precheck import parse_version, precheck_descriptor, summarize_issues
from rootproject.descriptor.types import (
    ANDROID_LIBRARY_PLUGIN,
    KOTLIN_ANDROID_PLUGIN,
    PluginSpec,
    RepositorySpec,
    RootDescriptor,
    default_descriptor,
)


def _codes(descriptor):
    return {i.code for i in precheck_descriptor(descriptor)}


def test_default_descriptor_is_clean():
    assert summarize_issues(precheck_descriptor(default_descriptor())) == (0, 0, 0)


@pytest.mark.parametrize(
    "v, expected",
    [("8.11.1", (8, 11, 1)), ("1.9.0", (1, 9, 0)), ("2.0.0-Beta1", (2, 0, 0)), ("", None), ("latest", None), ("1.x", None)],
)
def test_parse_version(v, expected):
    assert parse_version(v) == expected


def test_agp_variants_must_match():
    d = default_descriptor().with_plugin_version(ANDROID_LIBRARY_PLUGIN, "8.1.0")
    assert "AGP_VERSION_MISMATCH" in _codes(d)


def test_kotlin_version_is_independent():
    d = default_descriptor().with_plugin_version(KOTLIN_ANDROID_PLUGIN, "2.0.21")
    assert summarize_issues(precheck_descriptor(d))[0] == 0


def test_conflicting_duplicate_plugin():
    d = RootDescriptor(name="x", plugins=(PluginSpec("a.b", "1.0"), PluginSpec("a.b", "2.0")), repositories=(RepositorySpec("google"),), subprojects=("app",))
    assert "PLUGIN_DUPLICATE" in _codes(d)


def test_invalid_plugin_version():
    d = default_descriptor().with_plugin_version(KOTLIN_ANDROID_PLUGIN, "latest")
    assert "PLUGIN_VERSION" in _codes(d)


def test_repositories():
    d = RootDescriptor(
        name="x",
        repositories=(RepositorySpec("google"), RepositorySpec("google"), RepositorySpec("jcenterMirror")),
        subprojects=("app",),
    )
    issues = {i.code: i.severity for i in precheck_descriptor(d)}
    assert issues["REPO_DUPLICATE"] == "WARN"
    assert issues["REPO_UNKNOWN"] == "ERROR"
    assert "REPO_NONE" in _codes(RootDescriptor(name="x", subprojects=("app",)))


def test_subprojects_and_evaluation_dependency():
    d = RootDescriptor(name="x", repositories=(RepositorySpec("google"),), subprojects=("lib", "lib", "a/b"))
    codes = _codes(d)
    assert {"SUBPROJECT_DUPLICATE", "SUBPROJECT_NAME", "EVAL_DEPENDENCY_MISSING"} <= codes


def test_no_subprojects_is_info_only():
    d = RootDescriptor(name="x", repositories=(RepositorySpec("google"),))
    assert summarize_issues(precheck_descriptor(d)) == (0, 0, 1)
