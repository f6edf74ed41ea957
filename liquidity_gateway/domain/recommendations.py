"""Fixed advisory messages attached to analyses (product copy is Turkish)"""

from typing import Tuple

RUNWAY_RECOMMENDATIONS = {
    "critical": (
        "Acil nakit ihtiyacınız var - gelir artırma veya gider azaltma gerekli",
        "Kısa vadeli kredi limitleri değerlendirin",
        "Alacaklarınızı hızlandırma stratejileri uygulayın",
    ),
    "warning": (
        "Nakit pozisyonunuzu yakından takip edin",
        "Gelir artırma fırsatlarını değerlendirin",
        "Gereksiz giderleri gözden geçirin",
    ),
    "healthy": (
        "Sağlıklı nakit pozisyonunuz var",
        "Yatırım fırsatlarını değerlendirebilirsiniz",
    ),
}

NEGATIVE_GAP_RECOMMENDATIONS = (
    "Borçlarınız alacaklarınızdan fazla - nakit akışı riski var",
    "Alacak tahsilat süreçlerinizi hızlandırın",
    "Borç ödeme planlarını gözden geçirin",
)

POSITIVE_GAP_RECOMMENDATIONS = (
    "Pozitif nakit akışı pozisyonunuz var",
    "Alacaklarınızı zamanında tahsil etmeye devam edin",
)

ELEVATED_RISK_RECOMMENDATIONS = (
    "Nakit akışı yönetimini öncelik haline getirin",
    "Kısa vadeli finansman seçeneklerini değerlendirin",
)


def runway_recommendations(status: str) -> Tuple[str, ...]:
    return RUNWAY_RECOMMENDATIONS[status]


def cash_gap_recommendations(cash_gap: float, risk_level: str) -> Tuple[str, ...]:
    """Gap-direction advice, plus escalation advice for high and critical risk"""
    messages = NEGATIVE_GAP_RECOMMENDATIONS if cash_gap < 0 else POSITIVE_GAP_RECOMMENDATIONS
    if risk_level in ("critical", "high"):
        messages = messages + ELEVATED_RISK_RECOMMENDATIONS
    return messages


HEALTH_STATUS_INSIGHTS = {
    "excellent": "Mükemmel finansal sağlık - güçlü nakit pozisyonu",
    "good": "İyi finansal sağlık - mevcut durumunuzu koruyun",
    "fair": "Orta seviye finansal sağlık - dikkatli olun",
    "poor": "Zayıf finansal sağlık - acil önlemler gerekli",
    "critical": "Kritik finansal sağlık - derhal müdahale gerekli",
}

SHORT_RUNWAY_INSIGHT = "Runway çok kısa - nakit yönetimine odaklanın"
HIGH_CASH_FLOW_RISK_INSIGHT = "Yüksek nakit akışı riski - alacak tahsilatını hızlandırın"


def health_insights(health_status: str, runway_status: str, risk_level: str) -> Tuple[str, ...]:
    """Status headline followed by runway and cash flow warnings where they apply"""
    insights = [HEALTH_STATUS_INSIGHTS[health_status]]
    if runway_status == "critical":
        insights.append(SHORT_RUNWAY_INSIGHT)
    if risk_level in ("critical", "high"):
        insights.append(HIGH_CASH_FLOW_RISK_INSIGHT)
    return tuple(insights)
