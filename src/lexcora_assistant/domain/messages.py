"""Fixed, user-safe response texts keyed by language."""

from __future__ import annotations

from lexcora_assistant.domain.models import Language

DEMO_ANSWER = {
    Language.EN: "Demo Mode: API Key not configured. (Simulated Response) According to UAE Labour Law...",
    Language.AR: "وضع تجريبي: مفتاح API غير مكون. (رد محاكى) وفقاً لقانون العمل الإماراتي...",
}

DEMO_CHAT = {
    Language.EN: "Demo Mode: API Key not configured. I cannot process real-time requests without an API key.",
    Language.AR: "الوضع التجريبي: مفتاح API غير مكون. لا يمكنني معالجة الطلبات في الوقت الفعلي بدون مفتاح.",
}

NO_RESPONSE = {
    Language.EN: "No response generated.",
    Language.AR: "لم يتم إنشاء استجابة.",
}

SERVICE_UNAVAILABLE = {
    Language.EN: "Service temporarily unavailable. Please try again later.",
    Language.AR: "الخدمة غير متوفرة حالياً. يرجى المحاولة مرة أخرى لاحقاً.",
}

TECHNICAL_DIFFICULTIES = {
    Language.EN: "I apologize, but I am encountering technical difficulties at the moment.",
    Language.AR: "أعتذر، ولكنني أواجه صعوبات فنية في الوقت الحالي.",
}


__all__ = [
    "DEMO_ANSWER",
    "DEMO_CHAT",
    "NO_RESPONSE",
    "SERVICE_UNAVAILABLE",
    "TECHNICAL_DIFFICULTIES",
]
