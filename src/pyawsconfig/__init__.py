"""pyawsconfig - Layered service configuration for AWS SDK clients."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyawsconfig")
except PackageNotFoundError:
    __version__ = "0+local"
from pyawsconfig._constants import DEFAULT_RETRIES
from pyawsconfig._transport import DEFAULT_HTTP_CLIENT, HttpClient
from pyawsconfig.config import AwsConfig, default_config, merge_overrides, reset_default_config
from pyawsconfig.credentials import (
    DEFAULT_CHAIN_CREDENTIALS,
    ChainCredentials,
    Credentials,
    EC2RoleProvider,
    EnvProvider,
    SharedCredentialsProvider,
)
from pyawsconfig.exceptions import AwsConfigError, AwsError

__all__ = [
    "__version__",
    "AwsConfig",
    "AwsConfigError",
    "AwsError",
    "ChainCredentials",
    "Credentials",
    "DEFAULT_CHAIN_CREDENTIALS",
    "DEFAULT_HTTP_CLIENT",
    "DEFAULT_RETRIES",
    "EC2RoleProvider",
    "EnvProvider",
    "HttpClient",
    "SharedCredentialsProvider",
    "default_config",
    "merge_overrides",
    "reset_default_config",
]
