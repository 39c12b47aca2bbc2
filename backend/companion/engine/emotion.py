"""Map an assistant reply to the character pose shown next to it."""

from __future__ import annotations

from ..schemas import EmotionType

# Checked in order; the first rule with a matching cue wins.
EMOTION_RULES: tuple[tuple[EmotionType, tuple[str, ...]], ...] = (
    ("gavel_tap", (
        "verdict", "ruling", "judgment", "sentenced", "convicted", "found guilty",
        "判决", "裁定", "定罪",
    )),
    ("concerned", (
        "unfortunately", "serious", "risk", "penalt", "prison", "jail", "concern",
        "be careful", "warning", "danger", "worried",
        "风险", "严重", "处罚", "监禁", "担心", "警告",
    )),
    ("approving", (
        "strong case", "good news", "favorable", "favourable", "in your favor",
        "well done", "great", "excellent", "you're right",
        "有利", "好消息", "很好",
    )),
    ("presenting", (
        "recommend", "suggest", "next step", "you should", "first,", "1.",
        "建议", "下一步", "首先",
    )),
    ("thinking_deep", (
        "complex", "depends", "consider", "however", "on the other hand",
        "复杂", "取决于", "考虑", "然而",
    )),
    ("analyzing", (
        "analy", "evidence", "case", "precedent", "law", "legal",
        "分析", "证据", "案件", "法律",
    )),
)


def classify_emotion(text: str | None) -> EmotionType:
    if not text:
        return "idle"
    lowered = text.lower()
    for emotion, cues in EMOTION_RULES:
        if any(cue in lowered for cue in cues):
            return emotion
    return "idle"
