__all__ = [
    'AmazonIapClient',
    'Environment',
    'IapConfigError',
    'IapDecodeError',
    'IapErrorResponse',
    'IapException',
    'IapReceiptStatus',
    'IapResponse',
    'IapTimeout',
    'IapTransportError',
    'IapVendorRejected',
    'PRODUCTION_URL',
    'ProductType',
    'SANDBOX_URL',
    'SecretsManagerClient',
    'TimeoutSession',
]
from .client import PRODUCTION_URL, SANDBOX_URL, AmazonIapClient
from .enums import Environment, IapReceiptStatus, ProductType
from .exceptions import (
    IapConfigError,
    IapDecodeError,
    IapException,
    IapTimeout,
    IapTransportError,
    IapVendorRejected,
)
from .response import IapErrorResponse, IapResponse
from .secretsmanager import SecretsManagerClient
from .session import TimeoutSession
