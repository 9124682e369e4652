"""Generated configuration artifacts.

Each artifact is a small pydantic model. Integrations between tools
(prettier inside ESLint, ESLint or prettier as the editor formatter) are
applied through named `with_*` extensions that return a new model.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .types import TemplateKind

GIT_IGNORE = ["/node_modules", "/out", "/include", "*.tsbuildinfo"]

ROBLOX_TS_EXTENSION = "roblox-ts.vscode-roblox-ts"
ESLINT_EXTENSION = "dbaeumer.vscode-eslint"
PRETTIER_EXTENSION = "esbenp.prettier-vscode"


def render_gitignore() -> str:
    return "\n".join(GIT_IGNORE) + "\n"


def _dump(model: BaseModel) -> str:
    return json.dumps(model.model_dump(by_alias=True, exclude_none=True), indent="\t")


def render_package_json(
    base: dict[str, Any],
    template: TemplateKind,
    build_command: str,
    scope: str,
) -> dict[str, Any]:
    """Rewrite the package manager's freshly initialized package.json.

    Args:
        base: package.json as written by the package manager's init.
        template: Selected template; packages get publishing fields.
        build_command: Package manager build command, used for prepublishOnly.
        scope: Organization scope prepended to package names.

    Returns:
        A new package.json dict; `base` is left untouched.
    """
    descriptor = dict(base)
    descriptor["scripts"] = {
        "build": "rbxtsc",
        "watch": "rbxtsc -w",
    }
    # Installed as "latest" here; everything else goes through dev install
    descriptor["devDependencies"] = {"@rbxts/types": "latest"}

    if template is TemplateKind.PACKAGE:
        descriptor["name"] = f"{scope}/{descriptor.get('name', '')}"
        descriptor["main"] = "out/init.lua"
        descriptor["types"] = "out/index.d.ts"
        descriptor["files"] = ["out", "!**/*.tsbuildinfo"]
        descriptor["publishConfig"] = {"access": "public"}
        descriptor["scripts"]["prepublishOnly"] = build_command

    return descriptor


class _Artifact(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> str:
        return _dump(self)


class EslintParserOptions(_Artifact):
    jsx: bool = True
    use_jsx_text_node: bool = Field(default=True, alias="useJSXTextNode")
    ecma_version: int = 2018
    source_type: str = "module"
    project: str = "./tsconfig.json"


class EslintConfig(_Artifact):
    """.eslintrc contents."""

    parser: str = "@typescript-eslint/parser"
    parser_options: EslintParserOptions = Field(default_factory=EslintParserOptions)
    ignore_patterns: list[str] = Field(default_factory=lambda: ["/out"])
    plugins: list[str] = Field(default_factory=lambda: ["@typescript-eslint", "roblox-ts"])
    extends: list[str] = Field(
        default_factory=lambda: [
            "eslint:recommended",
            "plugin:@typescript-eslint/recommended",
            "plugin:roblox-ts/recommended",
        ]
    )
    rules: dict[str, Any] = Field(default_factory=dict)

    def with_prettier(self) -> "EslintConfig":
        """Run prettier as an ESLint rule."""
        return self.model_copy(
            update={
                "plugins": [*self.plugins, "prettier"],
                "extends": [*self.extends, "plugin:prettier/recommended"],
                "rules": {**self.rules, "prettier/prettier": "warn"},
            }
        )


class PrettierConfig(_Artifact):
    """.prettierrc contents."""

    print_width: int = 120
    tab_width: int = 4
    trailing_comma: str = "all"
    use_tabs: bool = True


class LanguageEditorSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    default_formatter: str = Field(alias="editor.defaultFormatter")
    format_on_save: bool = Field(default=True, alias="editor.formatOnSave")


class VSCodeSettings(BaseModel):
    """.vscode/settings.json contents."""

    model_config = ConfigDict(populate_by_name=True)

    typescript_tsdk: str = Field(
        default="node_modules/typescript/lib", alias="typescript.tsdk"
    )
    files_eol: str = Field(default="\n", alias="files.eol")
    typescript: LanguageEditorSettings | None = Field(default=None, alias="[typescript]")
    typescriptreact: LanguageEditorSettings | None = Field(
        default=None, alias="[typescriptreact]"
    )
    eslint_run: str | None = Field(default=None, alias="eslint.run")
    eslint_format_enable: bool | None = Field(default=None, alias="eslint.format.enable")

    def to_json(self) -> str:
        return _dump(self)

    def _with_formatter(self, extension_id: str, **update: Any) -> "VSCodeSettings":
        language = LanguageEditorSettings(default_formatter=extension_id)
        return self.model_copy(
            update={"typescript": language, "typescriptreact": language, **update}
        )

    def with_eslint(self) -> "VSCodeSettings":
        """Format and lint on save through the ESLint extension."""
        return self._with_formatter(
            ESLINT_EXTENSION, eslint_run="onType", eslint_format_enable=True
        )

    def with_prettier(self) -> "VSCodeSettings":
        """Format on save through the prettier extension."""
        return self._with_formatter(PRETTIER_EXTENSION)


class VSCodeExtensions(_Artifact):
    """.vscode/extensions.json contents."""

    recommendations: list[str] = Field(default_factory=lambda: [ROBLOX_TS_EXTENSION])

    def with_recommendation(self, extension_id: str) -> "VSCodeExtensions":
        return self.model_copy(
            update={"recommendations": [*self.recommendations, extension_id]}
        )


def build_eslint_config(prettier: bool) -> EslintConfig:
    config = EslintConfig()
    return config.with_prettier() if prettier else config


def build_editor_config(
    eslint: bool, prettier: bool
) -> tuple[VSCodeSettings, VSCodeExtensions]:
    """Editor settings and extension recommendations.

    ESLint, when enabled, also formats (it runs prettier itself when both
    are on), so the prettier extension is only recommended without ESLint.
    """
    settings = VSCodeSettings()
    extensions = VSCodeExtensions()
    if eslint:
        settings = settings.with_eslint()
        extensions = extensions.with_recommendation(ESLINT_EXTENSION)
    elif prettier:
        settings = settings.with_prettier()
        extensions = extensions.with_recommendation(PRETTIER_EXTENSION)
    return settings, extensions
