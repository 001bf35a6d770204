"""
Build clients out of process environment variables.

This is the only module that reads the environment, the client itself takes everything explicitly.

  IAP_ENVIRONMENT                       'production' selects the production endpoint, anything else sandbox
  IAP_SANDBOX_URL                       overrides the sandbox endpoint, ex: to point at a remote App Tester
  IAP_TIMEOUT                           default request timeout in seconds
  IAP_DEVELOPER_SECRET                  the developer secret
  SECRETSMANAGER_AMAZON_IAP_SECRET_NAME secrets manager secret to read the developer secret from, if not set directly
"""
import logging
import os

from .client import SANDBOX_URL, AmazonIapClient
from .enums import Environment
from .exceptions import IapConfigError
from .secretsmanager import SecretsManagerClient
from .session import DEFAULT_TIMEOUT

logger = logging.getLogger()


def get_environment():
    value = (os.environ.get('IAP_ENVIRONMENT') or '').strip().lower()
    return Environment.PRODUCTION if value == Environment.PRODUCTION else Environment.SANDBOX


def get_sandbox_url():
    return os.environ.get('IAP_SANDBOX_URL') or SANDBOX_URL


def get_timeout():
    value = os.environ.get('IAP_TIMEOUT')
    if not value:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError as err:
        raise IapConfigError(f'IAP_TIMEOUT must be a number of seconds, got `{value}`') from err
    if timeout <= 0:
        raise IapConfigError(f'IAP_TIMEOUT must be positive, got `{value}`')
    return timeout


def get_developer_secret(secrets_manager_client=None):
    secret = os.environ.get('IAP_DEVELOPER_SECRET')
    if secret:
        return secret
    secret_name = os.environ.get('SECRETSMANAGER_AMAZON_IAP_SECRET_NAME')
    if not secret_name:
        raise IapConfigError(
            'Amazon IAP developer secret not configured, '
            'set IAP_DEVELOPER_SECRET or SECRETSMANAGER_AMAZON_IAP_SECRET_NAME'
        )
    client = secrets_manager_client or SecretsManagerClient(secret_name)
    return client.get_developer_secret()


def client_from_env(secret=None, secrets_manager_client=None):
    environment = get_environment()
    if secret is None:
        secret = get_developer_secret(secrets_manager_client=secrets_manager_client)
    client = AmazonIapClient.new(
        secret, environment=environment, timeout=get_timeout(), sandbox_url=get_sandbox_url()
    )
    logger.info(f'Amazon IAP client configured for `{environment}` at `{client.base_url}`')
    return client
