class Environment:
    SANDBOX = 'sandbox'
    PRODUCTION = 'production'

    _ALL = (SANDBOX, PRODUCTION)


class ProductType:
    # Known values only, anything else amazon sends is passed through untouched
    ENTITLED = 'ENTITLED'
    SUBSCRIPTION = 'SUBSCRIPTION'
    CONSUMABLE = 'CONSUMABLE'

    _ALL = (ENTITLED, SUBSCRIPTION, CONSUMABLE)


class IapReceiptStatus:
    ACTIVE = 'ACTIVE'
    CANCELLED = 'CANCELLED'

    _ALL = (ACTIVE, CANCELLED)
