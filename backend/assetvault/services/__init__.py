"""Services — SQL implementations of the asset repository, favourite index and listers.

Invariants:
    - Every store call goes through infrastructure.database.store_operation
    - Variant dispatch happens only in variant_codec
"""

from assetvault.services.asset_store import AssetStore  # noqa: F401
