import json

import pytest
from moto import mock_aws

from amazon_iap import SecretsManagerClient

secret_name = 'KeyForAmazonIap'


@pytest.fixture
def client(aws_env):
    with mock_aws():
        yield SecretsManagerClient(secret_name)


def test_get_developer_secret(client):
    value = {'developerSecret': 'the-developer-secret', 'appId': 'the-app-id'}
    client.boto_client.create_secret(Name=secret_name, SecretString=json.dumps(value))
    assert client.get_amazon_iap_secret() == value
    assert client.get_developer_secret() == 'the-developer-secret'


def test_get_developer_secret_missing_key(client):
    client.boto_client.create_secret(Name=secret_name, SecretString=json.dumps({'apiKey': 'wrong-shape'}))
    with pytest.raises(KeyError, match='developerSecret'):
        client.get_developer_secret()


def test_get_developer_secret_not_json(client):
    client.boto_client.create_secret(Name=secret_name, SecretString='plain-text-secret')
    with pytest.raises(ValueError):
        client.get_developer_secret()


def test_get_developer_secret_does_not_exist(client):
    with pytest.raises(client.exceptions.ResourceNotFoundException):
        client.get_developer_secret()
