"""
Coach verification agent prompts.
"""

from src.services.verification.models import Evidence


def build_verification_system_prompt() -> str:
    """Build system prompt for the coach verification agent."""

    prompt = (
        "You are an expert at verifying coach and personal trainer profiles. "
        "Analyze the information provided and determine whether the user is really a professional coach. "
        "Respond ONLY with a JSON object."
    )

    return prompt


def build_verification_user_input(evidence: Evidence) -> str:
    """Build user input describing the applicant's evidence."""

    input_text = (
        "Analyze the following information from a user who is asking to be verified as a coach/trainer.\n"
        "\n"
        "**User information:**\n"
        "\n"
        f"- Type: {evidence.user_type}\n"
        f"- Name: {evidence.full_name}\n"
        f"- Email: {evidence.email}\n"
        f"- Description: {evidence.about}\n"
        f"- Specialization: {evidence.specialization}\n"
        f"- Years of experience: {evidence.years_of_experience}\n"
        f"- Certifications: {evidence.certifications}\n"
        f"- Location: {evidence.location}\n"
        f"- Documents provided: {len(evidence.documents)} file(s)\n"
        f"- Additional note: {evidence.note or 'none'}\n"
        "\n"
        "**Task:**\n"
        "\n"
        "Determine whether this user is really a professional coach/trainer based on:\n"
        "\n"
        "1. The selected user type\n"
        "2. The description and specialization\n"
        "3. The certifications mentioned\n"
        "4. The declared experience\n"
        "5. The documents provided (certifications, ID, license)\n"
        "\n"
        "**Respond ONLY with JSON in this exact format:**\n"
        "\n"
        "{\n"
        '  "isCoach": true,\n'
        '  "confidence": 0.85,\n'
        '  "analysis": "Detailed analysis",\n'
        '  "reasons": ["Reason 1", "Reason 2", "Reason 3"]\n'
        "}\n"
        "\n"
        "IMPORTANT: Respond only with the JSON, without any additional text.\n"
    )

    return input_text
