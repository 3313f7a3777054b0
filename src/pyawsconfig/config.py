"""Service configuration shared by all pyawsconfig-based clients."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
import threading
from typing import Any, TextIO

from pyawsconfig._constants import DEFAULT_RETRIES, ENV_REGION
from pyawsconfig._redact import redact_for_log
from pyawsconfig._transport import DEFAULT_HTTP_CLIENT, HttpClient
from pyawsconfig.credentials import DEFAULT_CHAIN_CREDENTIALS, Credentials
from pyawsconfig.exceptions import AwsConfigError

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class AwsConfig:
    """Service configuration for service clients.

    Every field is optional.  ``None`` means *not specified*, which is
    different from an explicit falsy value: ``disable_ssl=False``,
    ``log_level=0`` and ``endpoint=""`` are all real settings that win
    when merged over a base configuration.

    Instances are frozen.  Customisation always derives a new record via
    :meth:`merge` (or :meth:`with_overrides`), so the shared default can be
    read from any thread without locking.

    Parameters
    ----------
    credentials : Credentials or None
        Credentials used when signing requests.  Shared by reference
        between copies.
    endpoint : str or None
        Endpoint URL (hostname only or fully qualified URI) overriding the
        generated endpoint.  ``""`` uses the generated endpoint.  A region
        is still required when an endpoint is given.
    region : str or None
        Region to send requests to.
    disable_ssl : bool or None
        ``True`` to send requests without TLS.
    http_client : HttpClient or None
        HTTP client handle used to send requests.  Shared by reference.
    log_http_body : bool or None
        ``True`` to also log HTTP bodies.  Only effective when
        ``log_level`` is non-zero.
    log_level : int or None
        ``0`` disables logging; any other value enables it.
    logger : TextIO or None
        Writable stream log messages are written to.  Shared by reference.
    max_retries : int or None
        Maximum number of retries for a failed request.  ``-1`` defers to
        the service specific default.  Not validated.
    disable_param_validation : bool or None
        ``True`` to skip semantic validation of request input.
    disable_compute_checksums : bool or None
        ``True`` to skip computing request and response checksums (e.g.
        CRC32 checksums in DynamoDB).
    s3_force_path_style : bool or None
        ``True`` to force path-style addressing
        (``http://s3.amazonaws.com/BUCKET/KEY``) for S3 requests instead of
        virtual hosted buckets.
    """

    credentials: Credentials | None = None
    endpoint: str | None = None
    region: str | None = None
    disable_ssl: bool | None = None
    http_client: HttpClient | None = None
    log_http_body: bool | None = None
    log_level: int | None = None
    logger: TextIO | None = None
    max_retries: int | None = None
    disable_param_validation: bool | None = None
    disable_compute_checksums: bool | None = None
    s3_force_path_style: bool | None = None

    # ------------------------------------------------------------------
    # Copy / merge
    # ------------------------------------------------------------------

    def copy(self) -> AwsConfig:
        """Return a shallow copy.

        Scalar fields are independent of the source; ``credentials``,
        ``http_client`` and ``logger`` point at the same objects.
        """
        return dataclasses.replace(self)

    def merge(self, other: AwsConfig | None) -> AwsConfig:
        """Return a new config with every specified field of *other* applied.

        Fields that are ``None`` on *other* keep this config's value.  Falsy
        values (``False``, ``0``, ``""``) are specified and therefore
        override.  Neither ``self`` nor *other* is modified.  If *other* is
        ``None`` the result is a plain :meth:`copy`.
        """
        if other is None:
            return self.copy()
        if not isinstance(other, AwsConfig):
            raise TypeError(f"cannot merge {type(other).__name__} into {type(self).__name__}")

        changes = other.present_fields()
        if changes:
            _logger.debug("Applying config overrides: %s", sorted(changes))
        return dataclasses.replace(self, **changes)

    def with_overrides(self, **fields: Any) -> AwsConfig:
        """Merge an override record built from keyword arguments.

        ``cfg.with_overrides(region="eu-west-1")`` is shorthand for
        ``cfg.merge(AwsConfig(region="eu-west-1"))``; ``None`` values are
        ignored like any other unset field.
        """
        return self.merge(type(self)(**fields))

    def present_fields(self) -> dict[str, Any]:
        """Return the specified (non-``None``) fields keyed by name."""
        present: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if value is not None:
                present[f.name] = value
        return present

    # ------------------------------------------------------------------
    # Derived flags
    # ------------------------------------------------------------------

    @property
    def logging_enabled(self) -> bool:
        """Whether ``log_level`` is specified and non-zero."""
        return bool(self.log_level)

    @property
    def http_body_logging_enabled(self) -> bool:
        """Whether HTTP bodies should be logged (requires logging enabled)."""
        return self.logging_enabled and self.log_http_body is True

    def as_log_dict(self) -> dict[str, Any]:
        """Field summary safe to emit in debug logs."""
        return redact_for_log({f.name: getattr(self, f.name) for f in dataclasses.fields(self)})

    # ------------------------------------------------------------------
    # Defaults
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, **overrides: Any) -> AwsConfig:
        """Create the default configuration.

        Reads ``AWS_REGION`` (missing means ``""``, not unset) and fills
        every other field with the SDK default.  Explicit keyword arguments
        are merged on top; ``None`` values leave the default in place.

        Parameters
        ----------
        **overrides
            Field values that take precedence over env vars and defaults.

        Returns
        -------
        AwsConfig
            Fully populated configuration.

        Raises
        ------
        AwsConfigError
            If an override names a field that does not exist.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        for name in overrides:
            if name not in known:
                raise AwsConfigError(f"unknown configuration field {name!r}", field=name)

        base = cls(
            credentials=DEFAULT_CHAIN_CREDENTIALS,
            endpoint="",
            region=os.environ.get(ENV_REGION, ""),
            disable_ssl=False,
            http_client=DEFAULT_HTTP_CLIENT,
            log_http_body=False,
            log_level=0,
            logger=sys.stdout,
            max_retries=DEFAULT_RETRIES,
            disable_param_validation=False,
            disable_compute_checksums=False,
            s3_force_path_style=False,
        )
        return base.with_overrides(**overrides)


def merge_overrides(base: AwsConfig, *overrides: AwsConfig | None) -> AwsConfig:
    """Fold *overrides* onto *base*, left to right.

    Later overrides win over earlier ones; ``None`` entries are skipped.
    With no overrides the result is a copy of *base*.
    """
    effective = base.copy()
    for override in overrides:
        effective = effective.merge(override)
    return effective


_default_config: AwsConfig | None = None
_default_lock = threading.Lock()


def default_config() -> AwsConfig:
    """Return the process-wide default configuration.

    Built once from :meth:`AwsConfig.from_env` on first use.  The record is
    frozen; derive customised configs with :meth:`AwsConfig.merge` rather
    than replacing it.
    """
    global _default_config
    cfg = _default_config
    if cfg is not None:
        return cfg
    with _default_lock:
        if _default_config is None:
            _default_config = AwsConfig.from_env()
            _logger.debug("Default config initialised: %s", _default_config.as_log_dict())
        return _default_config


def reset_default_config() -> None:
    """Forget the cached default so the next access re-reads the environment.

    Only safe before any client has been built from the old default.
    """
    global _default_config
    with _default_lock:
        _default_config = None
