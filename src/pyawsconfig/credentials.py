"""Credential provider descriptors.

The configuration layer treats credentials as an opaque handle: it stores
whatever object the caller assigns to :attr:`AwsConfig.credentials` and
shares it by reference between copies.  The models in this module only
*describe* where credentials come from so the default configuration has
something concrete to point at.  Resolving them (reading environment
variables, parsing the shared credentials file, querying the EC2 instance
metadata service) is left to the request layer.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pyawsconfig._constants import DEFAULT_EC2_EXPIRY_WINDOW
from pyawsconfig.exceptions import AwsConfigError


class _ProviderModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class EnvProvider(_ProviderModel):
    """Credentials from ``AWS_ACCESS_KEY_ID`` / ``AWS_SECRET_ACCESS_KEY``."""

    kind: Literal["env"] = "env"


class SharedCredentialsProvider(_ProviderModel):
    """Credentials from the shared credentials file.

    Parameters
    ----------
    filename : str
        Path to the credentials file.  ``""`` selects the platform default
        (``~/.aws/credentials``).
    profile : str
        Profile name inside the file.  ``""`` selects ``default``.
    """

    kind: Literal["shared"] = "shared"
    filename: str = ""
    profile: str = ""


class EC2RoleProvider(_ProviderModel):
    """Credentials from the EC2 instance role.

    Parameters
    ----------
    expiry_window : float
        Seconds before the reported expiry at which the credentials are
        considered stale.
    """

    kind: Literal["ec2_role"] = "ec2_role"
    expiry_window: float = Field(default=DEFAULT_EC2_EXPIRY_WINDOW, ge=0)


CredentialsProvider = Annotated[
    EnvProvider | SharedCredentialsProvider | EC2RoleProvider,
    Field(discriminator="kind"),
]


class ChainCredentials(_ProviderModel):
    """Ordered list of providers; the first one yielding a value wins."""

    providers: tuple[CredentialsProvider, ...]

    @model_validator(mode="after")
    def _require_providers(self) -> ChainCredentials:
        if not self.providers:
            raise AwsConfigError("credential chain needs at least one provider", field="credentials")
        return self

    @property
    def provider_kinds(self) -> tuple[str, ...]:
        return tuple(p.kind for p in self.providers)


#: Concrete credentials type accepted by :attr:`AwsConfig.credentials`
#: (an alias of :class:`ChainCredentials`).
Credentials = ChainCredentials

#: Chain used by the default configuration: environment, then the shared
#: credentials file, then the EC2 instance role.
DEFAULT_CHAIN_CREDENTIALS = ChainCredentials(
    providers=(
        EnvProvider(),
        SharedCredentialsProvider(filename="", profile=""),
        EC2RoleProvider(expiry_window=DEFAULT_EC2_EXPIRY_WINDOW),
    )
)
