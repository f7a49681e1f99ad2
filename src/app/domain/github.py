"""Views de domínio sobre os payloads da API GitHub.

Cada view é uma projeção fixa: os campos declarados são a allowlist,
qualquer outro campo do upstream é descartado (extra="ignore") e campos
ausentes saem como null. Valores são copiados sem coerção (strict):
tipo divergente do upstream vira erro de payload. Views são imutáveis e vivem só durante a
requisição.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProfileView(BaseModel):
    """Projeção da conta autenticada (GET /user)."""

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    login: str | None = Field(default=None, description="Login da conta (owner dos repositórios).")
    id: int | None = Field(default=None, description="Identificador numérico da conta.")
    name: str | None = Field(default=None, description="Nome de exibição.")
    bio: str | None = Field(default=None, description="Biografia.")
    avatar_url: str | None = Field(default=None, description="URL do avatar.")
    html_url: str | None = Field(default=None, description="URL canônica do perfil.")
    location: str | None = Field(default=None, description="Localização declarada.")
    company: str | None = Field(default=None, description="Empregador declarado.")
    blog: str | None = Field(default=None, description="Website declarado.")
    created_at: str | None = Field(default=None, description="Criação da conta (ISO 8601).")
    updated_at: str | None = Field(default=None, description="Última atualização (ISO 8601).")


class RepositoryView(BaseModel):
    """Projeção de um repositório na listagem (GET /user/repos)."""

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    id: int | None = Field(default=None, description="Identificador numérico.")
    name: str | None = Field(default=None, description="Nome curto.")
    full_name: str | None = Field(default=None, description="Nome qualificado owner/name.")
    html_url: str | None = Field(default=None, description="URL canônica.")
    description: str | None = Field(default=None, description="Descrição.")
    private: bool | None = Field(default=None, description="Repositório privado.")
    fork: bool | None = Field(default=None, description="Repositório é fork.")
    created_at: str | None = Field(default=None, description="Criação (ISO 8601).")
    updated_at: str | None = Field(default=None, description="Última atualização (ISO 8601).")
    pushed_at: str | None = Field(default=None, description="Último push (ISO 8601).")
    language: str | None = Field(default=None, description="Linguagem principal.")
    forks_count: int | None = Field(default=None, description="Quantidade de forks.")
    stargazers_count: int | None = Field(default=None, description="Quantidade de estrelas.")
    watchers_count: int | None = Field(default=None, description="Quantidade de watchers.")
    open_issues_count: int | None = Field(
        default=None,
        description="Quantidade de issues abertas.",
    )


class ProfileOverview(BaseModel):
    """Resposta combinada de GET /github: perfil, contadores e repositórios."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    profile: ProfileView
    followers_count: int | None = Field(default=None, serialization_alias="followersCount")
    following_count: int | None = Field(default=None, serialization_alias="followingCount")
    personal_repositories: tuple[RepositoryView, ...] = Field(
        default=(),
        serialization_alias="personalRepositories",
    )

    def as_response(self) -> dict[str, object]:
        """Serializa com as chaves públicas (camelCase nos contadores)."""
        return self.model_dump(by_alias=True, mode="json")


class IssueCreationResult(BaseModel):
    """Resultado de POST /github/{repo}/issues."""

    model_config = ConfigDict(frozen=True)

    issue_url: str = Field(..., description="URL canônica da issue criada.")


PROFILE_FIELDS: tuple[str, ...] = tuple(ProfileView.model_fields)
REPOSITORY_FIELDS: tuple[str, ...] = tuple(RepositoryView.model_fields)


__all__ = [
    "PROFILE_FIELDS",
    "REPOSITORY_FIELDS",
    "IssueCreationResult",
    "ProfileOverview",
    "ProfileView",
    "RepositoryView",
]
