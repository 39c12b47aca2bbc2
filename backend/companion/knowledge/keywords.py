"""Keyword tables used to decide whether an exchange is about a legal matter.

Matching is plain lower-cased substring containment, so stems such as
"evade" also match "evaded" and "evading".
"""

USER_LEGAL_KEYWORDS: dict[str, tuple[str, ...]] = {
    "en": (
        # Technical terms
        "case", "lawsuit", "plaintiff", "defendant", "court", "judge", "legal",
        "contract", "breach", "damages", "liability", "negligence", "fraud",
        "dispute", "claim", "settlement", "trial", "evidence", "witness",
        "attorney", "lawyer", "prosecution", "defense", "verdict", "appeal",
        "litigation", "complaint", "injunction", "arbitration", "mediation",
        "sue", "sued", "suing", "tort", "criminal", "civil", "jurisdiction",
        "precedent", "statute", "law", "regulation", "violation",
        # Everyday phrasing
        "fight", "fought", "hit", "punch", "assault", "attack", "beat",
        "accused", "accuse", "blame", "charge", "arrest",
        "stole", "steal", "theft", "rob", "scam", "cheat",
        "crash", "accident", "collision", "damage", "injury", "hurt",
        "evade", "evaded", "avoid", "dodge", "skip",
        "tax", "taxes", "owe", "debt", "pay", "payment",
        "fired", "terminate", "dismiss", "harass", "discriminate",
        "divorce", "custody", "alimony", "separate",
    ),
    "es": (
        "pelea", "peleé", "peleado", "golpeé", "golpear", "pegué", "pegar", "asalto", "ataque",
        "acusaron", "acusar", "acusado", "denunciaron", "denunciar", "denunciado", "culpar",
        "robé", "robar", "robado", "hurtar", "estafar", "estafa", "fraude",
        "choqué", "chocar", "chocado", "accidente", "daño", "dañar", "lesión",
        "evadí", "evadir", "evadido", "evitar", "esquivar",
        "impuesto", "impuestos", "debo", "deuda", "pagar", "pago",
        "despedido", "despedir", "acosar", "acoso", "discriminar",
        "divorcio", "custodia", "pensión", "separar",
        "demanda", "demandar", "demandado", "juicio", "abogado", "fiscal",
    ),
    "zh": (
        "打架", "打了", "打人", "殴打", "袭击", "攻击",
        "指控", "被指控", "控告", "起诉", "逮捕",
        "偷", "偷了", "盗窃", "抢劫", "诈骗", "欺诈",
        "撞车", "撞了", "事故", "碰撞", "损害", "受伤",
        "逃税", "逃避", "避税", "欠税",
        "税", "税款", "欠", "债务", "付款",
        "解雇", "被解雇", "骚扰", "歧视",
        "离婚", "监护权", "赡养费", "分居",
        "诉讼", "原告", "被告", "法庭", "律师", "检察官",
    ),
}

ASSISTANT_LEGAL_INDICATORS: tuple[str, ...] = (
    "legal", "case", "evidence", "advice", "defense", "prosecution",
    "lawyer", "attorney", "court", "law", "liability", "claim",
    "witness", "settlement", "precedent", "statute", "rights",
)

# Replies containing these mean the assistant steered the user back to legal topics.
REDIRECT_PHRASES: tuple[str, ...] = (
    "specifically designed to analyze legal cases",
    "please describe a legal case",
    "i'm here to help with legal case analysis",
    "my expertise is in legal case analysis",
)
