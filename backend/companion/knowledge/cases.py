from .base import CaseAssessment, LocalizedText, PredefinedCase

BINANCE_REGULATORY = PredefinedCase(
    case_id="binance-regulatory",
    category="Regulatory",
    title=LocalizedText(
        en="Binance Regulatory Compliance",
        zh="Binance监管合规",
    ),
    description=LocalizedText(
        en=(
            "A cryptocurrency exchange faces regulatory scrutiny regarding "
            "KYC/AML compliance and licensing requirements in multiple jurisdictions."
        ),
        zh="一家加密货币交易所面临多个司法管辖区关于KYC/AML合规和许可要求的监管审查。",
    ),
    assessment=CaseAssessment(
        case_strength=65,
        success_probability=58,
        risk_level="medium",
        precedents=18,
        key_factors=[
            "Proactive compliance measures implemented",
            "Multi-jurisdictional regulatory cooperation",
            "Historical precedent of exchange settlements",
            "Evolving regulatory framework for crypto",
        ],
    ),
)

SMART_CONTRACT_DISPUTE = PredefinedCase(
    case_id="smart-contract-dispute",
    category="Smart Contract",
    title=LocalizedText(
        en="Smart Contract Dispute - DeFi Protocol",
        zh="智能合约纠纷 - DeFi协议",
    ),
    description=LocalizedText(
        en=(
            "A user claims losses due to a smart contract vulnerability in a DeFi "
            "lending protocol, seeking compensation for unauthorized fund withdrawals."
        ),
        zh="用户声称因DeFi借贷协议中的智能合约漏洞造成损失，寻求未授权资金提取的赔偿。",
    ),
    assessment=CaseAssessment(
        case_strength=42,
        success_probability=35,
        risk_level="high",
        precedents=12,
        key_factors=[
            "Code audit documentation available",
            "Terms of service limitations of liability",
            "Decentralized governance structure",
            'Precedent of "code is law" principle',
        ],
    ),
)

CRYPTO_FRAUD = PredefinedCase(
    case_id="crypto-fraud",
    category="Fraud",
    title=LocalizedText(
        en="Cryptocurrency Fraud Investigation",
        zh="加密货币欺诈调查",
    ),
    description=LocalizedText(
        en=(
            "Investigation of a suspected pump-and-dump scheme involving coordinated "
            "trading activity to manipulate token prices on multiple exchanges."
        ),
        zh="调查涉及多个交易所协调交易活动操纵代币价格的疑似拉高出货计划。",
    ),
    assessment=CaseAssessment(
        case_strength=78,
        success_probability=72,
        risk_level="low",
        precedents=23,
        key_factors=[
            "Clear blockchain transaction evidence",
            "Pattern of coordinated trading activity",
            "Multiple victim testimonies",
            "Existing securities fraud precedents",
        ],
    ),
)

BINANCE_ACCOUNT_FREEZE = PredefinedCase(
    case_id="binance-user-account",
    category="Platform Dispute",
    title=LocalizedText(
        en="Binance Account Freezing Dispute",
        zh="Binance账户冻结纠纷",
    ),
    description=LocalizedText(
        en=(
            "A user disputes account freezing and asset seizure by Binance, claiming "
            "insufficient evidence for suspected fraudulent activity on their account."
        ),
        zh="用户对Binance冻结账户和扣押资产提出异议，声称其账户涉嫌欺诈活动的证据不足。",
    ),
    assessment=CaseAssessment(
        case_strength=48,
        success_probability=41,
        risk_level="medium",
        precedents=15,
        key_factors=[
            "Platform terms of service provisions",
            "Evidence of suspicious activity patterns",
            "User cooperation with investigation",
            "Regulatory compliance obligations",
        ],
    ),
)
