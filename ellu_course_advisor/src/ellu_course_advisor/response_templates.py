"""
Templated Responses

Every canned advisor message in English and German. The state machine picks
the language from the profile (German when nothing is known yet).
"""

from typing import Dict, Optional

from ellu_course_advisor.catalog import LearningJourney

DEFAULT_LANGUAGE = "german"

TEMPLATES: Dict[str, Dict[str, str]] = {
    "welcome": {
        "english": (
            "Willkommen bei ELLU Studios! I'm delighted you're interested in pattern making and fashion design.\n\n"
            "To recommend the perfect learning journey for you, I'd love to learn about your background and goals.\n\n"
            "First, could you tell me about your current experience with sewing and pattern making? "
            "Are you a complete beginner, or do you have some experience already?"
        ),
        "german": (
            "Herzlich willkommen bei ELLU Studios! Ich freue mich sehr über Ihr Interesse an Schnittkonstruktion "
            "und Modedesign.\n\n"
            "Um Ihnen die perfekte Lernreise zu empfehlen, möchte ich gerne mehr über Ihren Hintergrund und Ihre "
            "Ziele erfahren.\n\n"
            "Erzählen Sie mir zuerst: Welche Erfahrung haben Sie bereits mit Nähen und Schnittkonstruktion? "
            "Sind Sie kompletter Anfänger oder haben Sie schon etwas Erfahrung?\n\n"
            "(Feel free to answer in English!)"
        ),
    },
    "welcome_again": {
        "english": (
            "Thank you for your interest in ELLU Studios! Let me help you find the perfect course. "
            "What's your current experience level with sewing or pattern making?"
        ),
        "german": (
            "Vielen Dank für Ihr Interesse an ELLU Studios! Ich helfe Ihnen gerne, den perfekten Kurs zu finden. "
            "Wie viel Erfahrung haben Sie bereits mit Nähen oder Schnittkonstruktion?"
        ),
    },
    "ask_goals": {
        "english": (
            "That's wonderful! Now, what's bringing you to fashion design? Are you thinking about this as a "
            "creative hobby, considering a career change, interested in starting your own fashion business, "
            "or perhaps drawn to sustainable fashion?"
        ),
        "german": (
            "Wunderbar! Was führt Sie zum Modedesign? Sehen Sie es als kreatives Hobby, denken Sie über einen "
            "Karrierewechsel nach, möchten Sie ein eigenes Modeunternehmen gründen, oder interessiert Sie "
            "nachhaltige Mode?"
        ),
    },
    "ask_style": {
        "english": (
            "Excellent! One more question to give you the best recommendations: Do you prefer learning through "
            "precise, mathematical approaches (like German engineering precision) or more intuitive, creative "
            "methods (like Parisian atelier techniques)? Or are you open to both?"
        ),
        "german": (
            "Ausgezeichnet! Noch eine Frage, damit ich Ihnen die besten Empfehlungen geben kann: Lernen Sie "
            "lieber mit präzisen, mathematischen Methoden (deutsche Ingenieurskunst) oder mit intuitiven, "
            "kreativen Techniken (Pariser Atelier)? Oder sind Sie offen für beides?"
        ),
    },
    "recommendation_menu": {
        "english": (
            "I'm happy to provide more details about any of these courses or help you compare different options.\n\n"
            "You can ask me things like:\n"
            "- \"Tell me more about the Classical Pattern Making course\"\n"
            "- \"What's the difference between construction and draping?\"\n"
            "- \"Can you compare the beginner and digital journeys?\"\n\n"
            "Or if you're ready to take the next step:\n"
            "- \"I'd like to schedule a consultation\"\n"
            "- \"Can you send me more information by email?\"\n\n"
            "What would be most helpful for you?"
        ),
        "german": (
            "Gerne gebe ich Ihnen mehr Details zu diesen Kursen oder helfe Ihnen beim Vergleich verschiedener "
            "Optionen.\n\n"
            "Sie können mich zum Beispiel fragen:\n"
            "- \"Erzählen Sie mir mehr über den Kurs Klassische Schnittkonstruktion\"\n"
            "- \"Was ist der Unterschied zwischen Konstruktion und Drapieren?\"\n\n"
            "Oder wenn Sie bereit für den nächsten Schritt sind:\n"
            "- \"Ich möchte einen Beratungstermin vereinbaren\"\n"
            "- \"Können Sie mir weitere Informationen per E-Mail zusenden?\"\n\n"
            "Was wäre für Sie am hilfreichsten?"
        ),
    },
    "no_recommendations": {
        "english": (
            "I'd love to help you find the perfect courses. Could you tell me more about your interests and goals?"
        ),
        "german": (
            "Ich helfe Ihnen gerne, die perfekten Kurse zu finden. Können Sie mir mehr über Ihre Interessen "
            "und Ziele erzählen?"
        ),
    },
    "comparison": {
        "english": (
            "Great question! Here's the key difference:\n\n"
            "**Classical Pattern Making (Klassische Schnittkonstruktion):**\n"
            "- Mathematical, precise approach\n"
            "- Perfect for structured garments (suits, coats, fitted dresses)\n"
            "- German engineering precision - very systematic\n"
            "- Ideal if you love technical accuracy and detailed measurements\n\n"
            "**Pattern Making through Draping (Schnittkonstruktion durch Drapieren):**\n"
            "- Creative, intuitive approach\n"
            "- Perfect for flowing, artistic designs (evening wear, avant-garde pieces)\n"
            "- Parisian atelier techniques - very artistic\n"
            "- Ideal if you prefer hands-on creativity and organic shapes\n\n"
            "Many of our students take both for complete mastery! Which style resonates more with your "
            "creative vision - precision or artistic flow?"
        ),
        "german": (
            "Gute Frage! Das ist der wesentliche Unterschied:\n\n"
            "**Klassische Schnittkonstruktion (Classical Pattern Making):**\n"
            "- Mathematischer, präziser Ansatz\n"
            "- Perfekt für strukturierte Kleidung (Anzüge, Mäntel, taillierte Kleider)\n"
            "- Deutsche Ingenieurskunst - sehr systematisch\n"
            "- Ideal, wenn Sie technische Genauigkeit und detaillierte Maße lieben\n\n"
            "**Schnittkonstruktion durch Drapieren (Pattern Making through Draping):**\n"
            "- Kreativer, intuitiver Ansatz\n"
            "- Perfekt für fließende, künstlerische Designs (Abendmode, Avantgarde)\n"
            "- Pariser Atelier-Techniken - sehr künstlerisch\n"
            "- Ideal, wenn Sie praktische Kreativität und organische Formen bevorzugen\n\n"
            "Viele unserer Studierenden belegen beide Kurse für die komplette Meisterschaft! Welcher Stil passt "
            "besser zu Ihrer kreativen Vision - Präzision oder künstlerischer Fluss?"
        ),
    },
    "email_request": {
        "english": (
            "I'd be delighted to send you detailed course information and pricing!\n\n"
            "Please share your email address, and I'll send you:\n"
            "- Complete course descriptions and schedules\n"
            "- Pricing information and payment options\n"
            "- Learning journey roadmaps\n"
            "- Success stories from our students\n"
            "- Upcoming course start dates\n\n"
            "What's the best email address to reach you?"
        ),
        "german": (
            "Sehr gerne sende ich Ihnen ausführliche Kursinformationen und Preise zu!\n\n"
            "Teilen Sie mir bitte Ihre E-Mail-Adresse mit, und Sie erhalten:\n"
            "- Vollständige Kursbeschreibungen und Zeitpläne\n"
            "- Preise und Zahlungsmöglichkeiten\n"
            "- Übersichten zu unseren Lernreisen\n"
            "- Erfolgsgeschichten unserer Studierenden\n"
            "- Kommende Kursstarttermine\n\n"
            "Unter welcher E-Mail-Adresse erreiche ich Sie am besten?"
        ),
    },
    "email_confirmed": {
        "english": (
            "Thank you! I'll send detailed course information, pricing and your learning journey roadmap "
            "to {email}.\n\n"
            "Is there anything else you'd like to know in the meantime?"
        ),
        "german": (
            "Vielen Dank! Ich sende ausführliche Kursinformationen, Preise und Ihre Lernreise an {email}.\n\n"
            "Gibt es in der Zwischenzeit noch etwas, das Sie wissen möchten?"
        ),
    },
    "scheduling": {
        "english": (
            "Wonderful! I'd love to arrange a free 30-minute consultation with our pattern making experts.\n\n"
            "During this call, we'll:\n"
            "- Review your learning goals in detail\n"
            "- Customize your learning journey\n"
            "- Answer all your questions about courses\n"
            "- Discuss scheduling and logistics\n"
            "- Help you feel confident about your choice\n\n"
            "Available consultation times this week:\n"
            "- Tuesday, 2:00 PM - 2:30 PM (CET)\n"
            "- Wednesday, 10:00 AM - 10:30 AM (CET)\n"
            "- Friday, 4:00 PM - 4:30 PM (CET)\n\n"
            "Which time works best for you? I'll also need your email address to send the calendar invitation."
        ),
        "german": (
            "Wunderbar! Gerne vereinbare ich eine kostenlose 30-minütige Beratung mit unseren "
            "Schnittkonstruktions-Experten.\n\n"
            "In diesem Gespräch werden wir:\n"
            "- Ihre Lernziele im Detail besprechen\n"
            "- Ihre Lernreise individuell anpassen\n"
            "- Alle Ihre Fragen zu den Kursen beantworten\n"
            "- Termine und Organisatorisches klären\n"
            "- Ihnen helfen, sich sicher zu entscheiden\n\n"
            "Verfügbare Beratungstermine diese Woche:\n"
            "- Dienstag, 14:00 - 14:30 Uhr (MEZ)\n"
            "- Mittwoch, 10:00 - 10:30 Uhr (MEZ)\n"
            "- Freitag, 16:00 - 16:30 Uhr (MEZ)\n\n"
            "Welcher Termin passt Ihnen am besten? Für die Kalendereinladung benötige ich außerdem Ihre "
            "E-Mail-Adresse."
        ),
    },
    "followup": {
        "english": (
            "Thank you for your continued interest in ELLU Studios!\n\n"
            "I'm here to help with any additional questions about:\n"
            "- Course content and what you'll learn\n"
            "- Scheduling and logistics\n"
            "- Pricing and payment options\n"
            "- Learning outcomes and career prospects\n"
            "- Technical requirements or materials needed\n\n"
            "What else would you like to know about your fashion education journey?"
        ),
        "german": (
            "Vielen Dank für Ihr anhaltendes Interesse an ELLU Studios!\n\n"
            "Ich helfe Ihnen gerne bei weiteren Fragen zu:\n"
            "- Kursinhalten und Lernzielen\n"
            "- Terminen und Organisatorischem\n"
            "- Preisen und Zahlungsmöglichkeiten\n"
            "- Lernergebnissen und Karriereperspektiven\n"
            "- Technischen Voraussetzungen und Materialien\n\n"
            "Was möchten Sie noch über Ihre Modeausbildung wissen?"
        ),
    },
    "refusal": {
        "english": (
            "I appreciate your interest, but I can only help with course recommendations and ELLU Studios "
            "information. How can I assist you with your fashion education journey?"
        ),
        "german": (
            "Entschuldigung, aber ich kann Ihnen nur bei Fragen zu unseren Modekursen helfen. Wie kann ich Sie "
            "bei Ihrer Modeausbildung bei ELLU Studios unterstützen?"
        ),
    },
    "message_too_long": {
        "english": (
            "I notice your message is quite long. I'm having trouble processing very lengthy requests. Could you "
            "please ask your question in a more concise way? I'm here to help with course recommendations and "
            "information about ELLU Studios!"
        ),
        "german": (
            "Ihre Nachricht ist recht lang, und sehr ausführliche Anfragen kann ich leider nur schwer bearbeiten. "
            "Könnten Sie Ihre Frage bitte etwas kürzer formulieren? Ich helfe Ihnen gerne bei Kursempfehlungen "
            "und Informationen zu ELLU Studios!"
        ),
    },
    "apology": {
        "english": (
            "I apologize, but I'm having trouble processing your request right now. Could you please try "
            "rephrasing your question about our courses?"
        ),
        "german": (
            "Entschuldigung, aber ich habe gerade Schwierigkeiten beim Bearbeiten Ihrer Anfrage. Könnten Sie "
            "Ihre Frage zu unseren Modekursen bitte anders formulieren?"
        ),
    },
}

_RECOMMENDATION_LABELS = {
    "english": {
        "intro": "Based on your answers, I recommend our **{name}**!",
        "path": "**Your Learning Path ({duration}):**",
        "phase": "**Phase {phase}**: {name} ({duration})",
        "goal": "**Goal**: {outcome}",
        "why": "This journey is perfect for you because: {reasoning}",
        "next": (
            "Would you like me to:\n"
            "📅 Schedule a free 30-minute consultation to discuss this path in detail?\n"
            "📧 Send you comprehensive course information and pricing via email?\n"
            "💬 Tell you more about any specific courses that interest you?\n\n"
            "What sounds most helpful?"
        ),
    },
    "german": {
        "intro": "Basierend auf Ihren Antworten empfehle ich Ihnen unsere **{name}**!",
        "path": "**Ihr Lernweg ({duration}):**",
        "phase": "**Phase {phase}**: {name} ({duration})",
        "goal": "**Ziel**: {outcome}",
        "why": "Diese Lernreise passt perfekt zu Ihnen: {reasoning}",
        "next": (
            "Möchten Sie, dass ich:\n"
            "📅 eine kostenlose 30-minütige Beratung zu diesem Lernweg vereinbare?\n"
            "📧 Ihnen ausführliche Kursinformationen und Preise per E-Mail zusende?\n"
            "💬 Ihnen mehr über einzelne Kurse erzähle?\n\n"
            "Was wäre für Sie am hilfreichsten?"
        ),
    },
}


class ResponseTemplates:
    """Lookup of canned responses by key and language."""

    def __init__(self, default_language: str = DEFAULT_LANGUAGE):
        self.default_language = default_language

    def language(self, preferred: Optional[str]) -> str:
        return preferred if preferred in ("english", "german") else self.default_language

    def get(self, key: str, language: Optional[str] = None, **values: str) -> str:
        """
        Render a template.

        Args:
            key: Template key (see TEMPLATES)
            language: "english" / "german"; anything else falls back to the default
            **values: Placeholder values for str.format

        Returns:
            Rendered text
        """
        text = TEMPLATES[key][self.language(language)]
        return text.format(**values) if values else text

    def recommendation(self, journey: LearningJourney, reasoning: str, language: Optional[str] = None) -> str:
        """Journey overview with phases, outcome, the top pick's reasoning and next-step offers."""
        labels = _RECOMMENDATION_LABELS[self.language(language)]
        phases = "\n\n".join(
            labels["phase"].format(phase=p.phase, name=p.name, duration=p.duration) + f"\n   {p.description}"
            for p in journey.phases
        )
        return "\n\n".join([
            labels["intro"].format(name=journey.name),
            journey.description,
            labels["path"].format(duration=journey.duration),
            phases,
            labels["goal"].format(outcome=journey.outcome),
            labels["why"].format(reasoning=reasoning),
            labels["next"],
        ])
