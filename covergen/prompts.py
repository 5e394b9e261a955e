"""
Cover letter prompt construction.
"""
from covergen.forms import GenerationRequest

# (upper bound inclusive, label)
TONE_SCALE = (
    (3, "friendly and casual"),
    (6, "professional and neutral"),
    (10, "very formal and businesslike"),
)

TONE_LEGEND = "0–3 = friendly/casual; 5 = professional/neutral; 10 = very formal/businesslike"


def tone_label(value: int) -> str:
    """Map a 0-10 tone slider value to the label used in the prompt."""
    if value < 0 or value > 10:
        raise ValueError(f"Tone value must be between 0 and 10, got {value}")
    for upper, label in TONE_SCALE:
        if value <= upper:
            return label


def describe_tone(raw: str) -> str:
    """
    Resolve the submitted tone to a label.

    The form sends either the slider position ("0".."10") or a label the
    browser already rendered. Numeric values in range are mapped, anything
    else is passed through.
    """
    text = (raw or "").strip()
    try:
        value = int(text)
    except ValueError:
        return text
    if 0 <= value <= 10:
        return tone_label(value)
    return text


def reason_line(reason_for_applying: str) -> str:
    if not (reason_for_applying or "").strip():
        return ""
    return f'- Use this reason for applying to strengthen the connection: "{reason_for_applying}"\n'


def build_prompt(req: GenerationRequest) -> str:
    """Render the instruction block sent to the completion endpoint."""
    return f"""
You are an expert career coach and resume writer.

Given the following details, generate:
1. A bullet list of key qualifications tailored to the job (using action verbs, avoid generic phrasing, focus on what truly matches the job requirements).
2. A unique, authentic, and highly personalized 3-paragraph cover letter for this specific job and person, using the candidate's name and email.

Guidelines:
- Do NOT simply restate the resume. Instead, synthesize and highlight the most relevant experiences, skills, and motivations that make the candidate a great fit for the specific role and company.
- Weave in concrete achievements or moments from the resume, but do it in a narrative way.
- Use details from the candidate's background, education, or story, not just lists of skills.
- In the cover letter, include a sentence showing genuine interest in the company or its mission, and why the candidate would be excited to join this specific team.
{reason_line(req.reason_for_applying)}- Write in the tone specified below.
- Make the letter sound real, warm, and written by a human.

Job Description:
{req.job_description}

Resume:
{req.resume}

Candidate Details:
Name: {req.name}
Email: {req.email}
Tone: {describe_tone(req.tone_description)} ({TONE_LEGEND})

Output:
""".strip()
