"""학부모 화면용 정적 2개 언어(암하라어/영어) 메시지 테이블입니다."""

DEFAULT_LANG = "en"

MESSAGES = {
    "answer_all_questions": {
        "am": "እባክዎ ሁሉንም ጥያቄዎች ይመልሱ",
        "en": "Please answer all questions",
    },
    "feedback_submitted": {
        "am": "አስተያየትዎ በተሳካ ሁኔታ ተላኳል! ስለሰጡን አስተያየት እናመሰግናለን።",
        "en": "Your feedback has been submitted successfully! Thank you for your response.",
    },
    "access_denied": {
        "en": "Access Denied: Invalid Student ID or Phone Number. Please contact the Admin to register.",
    },
}


def get_message(key: str, lang: str | None = None) -> str:
    table = MESSAGES[key]
    return table.get(lang or DEFAULT_LANG) or table[DEFAULT_LANG]
