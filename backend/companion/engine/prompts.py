from __future__ import annotations

LANGUAGE_INSTRUCTIONS = {
    "en": (
        "IMPORTANT: You MUST respond in English. "
        "All your responses must be in English, not Chinese."
    ),
    "zh": (
        "IMPORTANT: You MUST respond in Chinese (中文). "
        "All your responses must be in Chinese characters, not English."
    ),
}

BUSY_MESSAGES = {
    "en": "Oops! My response circuits are a bit busy. Could you try again?",
    "zh": "哎呀！我的响应线路有点忙。您能再试一次吗？",
}

APOLOGY_MESSAGES = {
    "en": "Oops! There was a small error processing that. Could you try again?",
    "zh": "哎呀！处理时出了点小错误。您能再试一次吗？",
}

NOT_CONFIGURED_MESSAGES = {
    "en": (
        "Hello! It looks like I don't have AI credentials configured. Please make "
        "sure OPENAI_API_KEY or ANTHROPIC_API_KEY is set for the server."
    ),
    "zh": "您好！看起来我没有配置AI凭证。请确保服务器已设置OPENAI_API_KEY或ANTHROPIC_API_KEY。",
}

ANALYTICS_SYSTEM_PROMPT = (
    "You are a legal analytics expert. Analyze cases and return JSON analytics. "
    "Be specific to the case type."
)


def localized(table: dict[str, str], language: str) -> str:
    return table.get(language, table["en"])


def companion_system_prompt(language: str) -> str:
    return (
        "You are CZ Judge Companion, a supportive AI legal assistant built on BNB Chain "
        "to help users navigate legal situations.\n\n"
        f"{localized(LANGUAGE_INSTRUCTIONS, language)}\n\n"
        "Your Purpose:\n"
        "- Analyze legal cases and provide strategic recommendations based on case law and precedents\n"
        "- Help users understand their legal position and suggest practical next steps\n"
        "- Act as a knowledgeable legal advisor offering objective guidance\n\n"
        "How to Help:\n"
        '- When users describe situations like "I had a fight", "I was accused of...", '
        '"I evaded taxes", etc., treat these as legitimate legal cases\n'
        "- Provide case analysis including: case type, strengths/weaknesses, relevant "
        "precedents, success probability\n"
        "- Offer strategic recommendations: what evidence to gather, potential defenses, "
        "settlement considerations\n"
        "- Suggest practical next steps: whether to seek formal legal counsel, what to "
        "document, timelines\n"
        "- Stay balanced but supportive - help users understand both risks and opportunities\n\n"
        "Guidelines:\n"
        "- Accept any legal-related question or situation description\n"
        "- Focus on analysis and strategic guidance, not just refusing to help\n"
        "- Be practical and actionable in your recommendations\n"
        "- For non-legal topics, briefly redirect to legal matters\n\n"
        "Your Tone: Professional, supportive, analytical, and solution-oriented.\n"
        "Keep responses concise but informative (2-4 sentences per message)."
    )


def analytics_prompt(user_text: str, assistant_text: str) -> str:
    return (
        "Analyze this legal situation and provide specific case analytics in JSON format.\n\n"
        f'User\'s situation: "{user_text}"\n\n'
        f'AI\'s response: "{assistant_text}"\n\n'
        "Based on this SPECIFIC situation, provide realistic analytics in this EXACT JSON format:\n"
        "{\n"
        '  "caseStrength": <number 20-95>,\n'
        '  "successProbability": <number 15-90>,\n'
        '  "riskLevel": "<low|medium|high>",\n'
        '  "keyFactors": ["factor 1", "factor 2", "factor 3"],\n'
        '  "precedents": <number 5-25>\n'
        "}\n\n"
        "Guidelines:\n"
        "- caseStrength: How strong is THIS specific case based on the situation described (20-95%)\n"
        "- successProbability: Likelihood of favorable outcome for THIS situation (15-90%)\n"
        '- riskLevel: "low" if probability >65%, "medium" if 35-65%, "high" if <35%\n'
        "- keyFactors: 3-5 factors SPECIFIC to THIS case type (e.g., for family dispute: "
        '"Witness testimony from family members", "Evidence of injuries", '
        '"Prior history of incidents")\n'
        "- precedents: Estimated similar cases (5-25)\n\n"
        "IMPORTANT: Factors must be relevant to THIS specific situation. "
        "DO NOT use generic factors.\n"
        "Return ONLY the JSON object, no other text."
    )
