"""
Decoding of Amazon Receipt Verification Service (RVS) response bodies.

https://developer.amazon.com/docs/in-app-purchasing/iap-rvs-for-android-apps.html

Decoding is strict about types but lenient about presence: a field that is missing from
the payload, or that amazon sends as null, takes its zero value ('' / 0 / False). For the
date fields that zero is a contract, 0 means 'not applicable'.
"""
import json

import pendulum

from .enums import IapReceiptStatus
from .exceptions import IapDecodeError

_missing = object()


def _nullable(data, key, kind):
    "Pull `key` out of the json object, returning None if absent or null, raising if of the wrong type"
    value = data.get(key, _missing)
    if value is _missing or value is None:
        return None
    # bool is a subclass of int, but amazon's true/false is never a valid number
    if kind is int and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f'Field `{key}` must be an integer, got `{type(value).__name__}`')
    if not isinstance(value, kind):
        raise ValueError(f'Field `{key}` must be of type `{kind.__name__}`, got `{type(value).__name__}`')
    return value


def _or_zero(value, zero):
    return zero if value is None else value


def _from_ms(ms):
    return pendulum.from_timestamp(ms / 1000) if ms else None


def parse_json(body):
    "Decode the raw response body, raises IapDecodeError if it is not a json object"
    try:
        data = json.loads(body)
    except ValueError as err:
        raise IapDecodeError(err) from err
    if not isinstance(data, dict):
        err = ValueError(f'Expected a json object in response body, got `{type(data).__name__}`')
        raise IapDecodeError(err) from err
    return data


class IapResponse:

    wire_keys = {
        'receipt_id': 'receiptId',
        'product_type': 'productType',
        'product_id': 'productId',
        'parent_product_id': 'parentProductId',
        'purchase_date': 'purchaseDate',
        'renewal_date': 'renewalDate',
        'cancel_date': 'cancelDate',
        'quantity': 'quantity',
        'beta_product': 'betaProduct',
        'test_transaction': 'testTransaction',
        'term': 'term',
        'term_sku': 'termSku',
    }

    def __init__(
        self,
        receipt_id='',
        product_type='',
        product_id='',
        parent_product_id='',
        purchase_date=0,
        renewal_date=0,
        cancel_date=0,
        quantity=0,
        beta_product=False,
        test_transaction=False,
        term='',
        term_sku='',
    ):
        self.receipt_id = receipt_id
        self.product_type = product_type
        self.product_id = product_id
        self.parent_product_id = parent_product_id
        self.purchase_date = purchase_date
        self.renewal_date = renewal_date
        self.cancel_date = cancel_date
        self.quantity = quantity
        self.beta_product = beta_product
        self.test_transaction = test_transaction
        self.term = term
        self.term_sku = term_sku

    @classmethod
    def from_json(cls, data):
        "Build from a decoded RVS success body. Raises IapDecodeError on a wrongly typed field."
        try:
            receipt_id = _nullable(data, 'receiptId', str)
            product_type = _nullable(data, 'productType', str)
            product_id = _nullable(data, 'productId', str)
            parent_product_id = _nullable(data, 'parentProductId', str)
            purchase_date = _nullable(data, 'purchaseDate', int)
            renewal_date = _nullable(data, 'renewalDate', int)
            cancel_date = _nullable(data, 'cancelDate', int)
            quantity = _nullable(data, 'quantity', int)
            beta_product = _nullable(data, 'betaProduct', bool)
            test_transaction = _nullable(data, 'testTransaction', bool)
            term = _nullable(data, 'term', str)
            term_sku = _nullable(data, 'termSku', str)
        except ValueError as err:
            raise IapDecodeError(err) from err

        # nulls collapse to zero values only here, at the edge of the public type
        return cls(
            receipt_id=_or_zero(receipt_id, ''),
            product_type=_or_zero(product_type, ''),
            product_id=_or_zero(product_id, ''),
            parent_product_id=_or_zero(parent_product_id, ''),
            purchase_date=_or_zero(purchase_date, 0),
            renewal_date=_or_zero(renewal_date, 0),
            cancel_date=_or_zero(cancel_date, 0),
            quantity=_or_zero(quantity, 0),
            beta_product=_or_zero(beta_product, False),
            test_transaction=_or_zero(test_transaction, False),
            term=_or_zero(term, ''),
            term_sku=_or_zero(term_sku, ''),
        )

    def __eq__(self, other):
        if not isinstance(other, IapResponse):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        fields = ', '.join(f'{attr}={getattr(self, attr)!r}' for attr in self.wire_keys)
        return f'IapResponse({fields})'

    def to_dict(self):
        "The camelCase form amazon uses on the wire"
        return {key: getattr(self, attr) for attr, key in self.wire_keys.items()}

    @property
    def purchased_at(self):
        return _from_ms(self.purchase_date)

    @property
    def renewal_at(self):
        return _from_ms(self.renewal_date)

    @property
    def cancelled_at(self):
        return _from_ms(self.cancel_date)

    def determine_status(self, now=None):
        now = now or pendulum.now('utc')
        cancelled_at = self.cancelled_at
        if cancelled_at and cancelled_at <= now:
            return IapReceiptStatus.CANCELLED
        return IapReceiptStatus.ACTIVE


class IapErrorResponse:
    "Body amazon sends along with any non-200 status"

    def __init__(self, message='', status=False):
        self.message = message
        self.status = status

    @classmethod
    def from_json(cls, data):
        try:
            message = _nullable(data, 'message', str)
            status = _nullable(data, 'status', bool)
        except ValueError as err:
            raise IapDecodeError(err) from err
        return cls(message=_or_zero(message, ''), status=_or_zero(status, False))
