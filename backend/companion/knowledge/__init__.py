from .cases import (
    BINANCE_ACCOUNT_FREEZE,
    BINANCE_REGULATORY,
    CRYPTO_FRAUD,
    SMART_CONTRACT_DISPUTE,
)

PREDEFINED_CASES = {
    case.case_id: case
    for case in (
        BINANCE_REGULATORY,
        SMART_CONTRACT_DISPUTE,
        CRYPTO_FRAUD,
        BINANCE_ACCOUNT_FREEZE,
    )
}
