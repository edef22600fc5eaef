from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

JsonDict = dict[str, Any]

SCHEMA_VERSION = "0.1"
DEFAULT_BUILD_DIR = "../../build"
DEFAULT_EVALUATION_DEPENDS_ON = ":app"

# Repository shorthands understood without an explicit url.
WELL_KNOWN_REPOSITORIES: dict[str, str] = {
    "google": "https://dl.google.com/dl/android/maven2/",
    "mavenCentral": "https://repo.maven.apache.org/maven2/",
}

ANDROID_APPLICATION_PLUGIN = "com.android.application"
ANDROID_LIBRARY_PLUGIN = "com.android.library"
KOTLIN_ANDROID_PLUGIN = "org.jetbrains.kotlin.android"


@dataclass(frozen=True, slots=True)
class PluginSpec:
    id: str
    version: str
    apply: bool = False

    def to_dict(self) -> JsonDict:
        return {"id": self.id, "version": self.version, "apply": self.apply}


@dataclass(frozen=True, slots=True)
class RepositorySpec:
    name: str
    url: str | None = None

    def effective_url(self) -> str | None:
        return self.url or WELL_KNOWN_REPOSITORIES.get(self.name)

    def to_dict(self) -> JsonDict | str:
        # Well-known repositories round-trip to their bare name.
        if self.url is None:
            return self.name
        return {"name": self.name, "url": self.url}


@dataclass(frozen=True, slots=True)
class RootDescriptor:
    name: str
    build_dir: str = DEFAULT_BUILD_DIR
    plugins: tuple[PluginSpec, ...] = ()
    repositories: tuple[RepositorySpec, ...] = ()
    subprojects: tuple[str, ...] = ()
    evaluation_depends_on: str | None = DEFAULT_EVALUATION_DEPENDS_ON
    schema_version: str = SCHEMA_VERSION
    extra: JsonDict = field(default_factory=dict, compare=False)

    def plugin(self, plugin_id: str) -> PluginSpec | None:
        for p in self.plugins:
            if p.id == plugin_id:
                return p
        return None

    def with_plugin_version(self, plugin_id: str, version: str) -> RootDescriptor:
        plugins = tuple(PluginSpec(p.id, version, p.apply) if p.id == plugin_id else p for p in self.plugins)
        return RootDescriptor(
            name=self.name,
            build_dir=self.build_dir,
            plugins=plugins,
            repositories=self.repositories,
            subprojects=self.subprojects,
            evaluation_depends_on=self.evaluation_depends_on,
            schema_version=self.schema_version,
            extra=dict(self.extra),
        )

    def to_dict(self) -> JsonDict:
        data: JsonDict = {
            "schema_version": self.schema_version,
            "name": self.name,
            "build_dir": self.build_dir,
            "plugins": [p.to_dict() for p in self.plugins],
            "repositories": [r.to_dict() for r in self.repositories],
            "subprojects": list(self.subprojects),
            "evaluation_depends_on": self.evaluation_depends_on,
        }
        for k, v in self.extra.items():
            data.setdefault(k, v)
        return data

    @classmethod
    def from_dict(cls, data: JsonDict) -> RootDescriptor:
        """
        Build a descriptor from already-validated JSON data.

        Unknown top-level keys are preserved in `extra`.
        """
        plugins = tuple(
            PluginSpec(id=str(p["id"]), version=str(p["version"]), apply=bool(p.get("apply", False)))
            for p in data.get("plugins", [])
        )
        repos: list[RepositorySpec] = []
        for r in data.get("repositories", []):
            if isinstance(r, str):
                repos.append(RepositorySpec(name=r))
            else:
                repos.append(RepositorySpec(name=str(r["name"]), url=r.get("url")))
        known = {
            "schema_version",
            "name",
            "build_dir",
            "plugins",
            "repositories",
            "subprojects",
            "evaluation_depends_on",
        }
        return cls(
            name=str(data["name"]),
            build_dir=str(data.get("build_dir", DEFAULT_BUILD_DIR)),
            plugins=plugins,
            repositories=tuple(repos),
            subprojects=tuple(str(s) for s in data.get("subprojects", [])),
            evaluation_depends_on=data.get("evaluation_depends_on", DEFAULT_EVALUATION_DEPENDS_ON),
            schema_version=str(data.get("schema_version", SCHEMA_VERSION)),
            extra={k: v for k, v in data.items() if k not in known},
        )


def default_descriptor(name: str = "android") -> RootDescriptor:
    """
    The stock root descriptor of an Android host project: AGP plugins pinned
    together, Kotlin Android independent, google + mavenCentral, output
    relocated two levels up and every subproject evaluated after `:app`.
    """
    return RootDescriptor(
        name=name,
        build_dir=DEFAULT_BUILD_DIR,
        plugins=(
            PluginSpec(ANDROID_APPLICATION_PLUGIN, "8.11.1"),
            PluginSpec(ANDROID_LIBRARY_PLUGIN, "8.11.1"),
            PluginSpec(KOTLIN_ANDROID_PLUGIN, "1.9.0"),
        ),
        repositories=(RepositorySpec("google"), RepositorySpec("mavenCentral")),
        subprojects=("app",),
        evaluation_depends_on=DEFAULT_EVALUATION_DEPENDS_ON,
    )
