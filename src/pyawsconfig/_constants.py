"""Internal constants shared across the library."""

#: The default number of retries for a service.  ``-1`` defers the
#: retry ceiling to the service specific default.
DEFAULT_RETRIES = -1

#: Environment variable seeding the default region.
ENV_REGION = "AWS_REGION"

#: Seconds before expiry at which EC2 role credentials are refreshed.
DEFAULT_EC2_EXPIRY_WINDOW: float = 5 * 60
