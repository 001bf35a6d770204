import json

import boto3


class SecretsManagerClient:
    def __init__(self, amazon_iap_secret_name):
        self.boto_client = boto3.client('secretsmanager')
        self.exceptions = self.boto_client.exceptions
        self.amazon_iap_secret_name = amazon_iap_secret_name

    def get_amazon_iap_secret(self):
        "The stored secret is a json object, ex: {\"developerSecret\": \"...\"}"
        if not hasattr(self, '_amazon_iap_secret'):
            resp = self.boto_client.get_secret_value(SecretId=self.amazon_iap_secret_name)
            self._amazon_iap_secret = json.loads(resp['SecretString'])
        return self._amazon_iap_secret

    def get_developer_secret(self):
        return self.get_amazon_iap_secret()['developerSecret']
