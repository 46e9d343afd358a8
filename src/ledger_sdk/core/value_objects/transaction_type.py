"""Transaction type codes used as search filters."""

from enum import IntEnum


class TransactionType(IntEnum):
    """Canonical transaction type codes of the ledger.

    The decimal value of each member is its token in the ``type`` query
    parameter of transaction searches.
    """
    RESERVED = 0
    TRANSFER = 0x4154
    NAMESPACE_REGISTRATION = 0x414E
    ADDRESS_ALIAS = 0x424E
    MOSAIC_ALIAS = 0x434E
    MOSAIC_DEFINITION = 0x414D
    MOSAIC_SUPPLY_CHANGE = 0x424D
    MULTISIG_ACCOUNT_MODIFICATION = 0x4155
    AGGREGATE_COMPLETE = 0x4141
    AGGREGATE_BONDED = 0x4241
    HASH_LOCK = 0x4148
    SECRET_LOCK = 0x4152
    SECRET_PROOF = 0x4252
    ACCOUNT_ADDRESS_RESTRICTION = 0x4150
    ACCOUNT_MOSAIC_RESTRICTION = 0x4250
    ACCOUNT_OPERATION_RESTRICTION = 0x4350
    ACCOUNT_KEY_LINK = 0x414C
    NODE_KEY_LINK = 0x424C
    VRF_KEY_LINK = 0x4243
    VOTING_KEY_LINK = 0x4143
    MOSAIC_ADDRESS_RESTRICTION = 0x4251
    MOSAIC_GLOBAL_RESTRICTION = 0x4151
    ACCOUNT_METADATA = 0x4144
    MOSAIC_METADATA = 0x4244
    NAMESPACE_METADATA = 0x4344

    @property
    def token(self) -> str:
        """Wire token for this type."""
        return str(self.value)
