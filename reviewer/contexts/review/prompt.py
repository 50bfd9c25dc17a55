"""
Review prompt template.

The resume and job description are interpolated verbatim between triple-quote
markers. Nothing is escaped: the model sees exactly what the user supplied.
"""

# Keys the model must return, in the order the instructions ask for them
REVIEW_KEYS = ("review", "ai_rating", "ats_score", "suggestions", "spelling_errors")

_PROMPT_TEMPLATE = '''\
You are a professional resume reviewer and ATS (Applicant Tracking System) expert. \
Given the following resume and job description (JD), do the following:

1. Give an overall AI review of the resume for this JD (max 5 lines).
2. Give an AI rating out of 100 for how well the resume matches the JD.
3. Give an ATS score (keyword match score out of 100) for the resume against the JD.
4. Suggest improvements in the form: "Replace: <current line> With: <suggested line>" \
(at least 3 suggestions).
5. List any spelling errors to correct (if any).

Resume:
"""
{resume}
"""

Job Description:
"""
{job_description}
"""

Respond in JSON with keys: review, ai_rating, ats_score, suggestions (array), \
spelling_errors (array).'''


def build_review_prompt(resume: str, job_description: str) -> str:
    """
    Build the review prompt for a resume and job description.

    Args:
        resume: Extracted resume text
        job_description: Job description pasted by the user

    Returns:
        Prompt string for the LLM
    """
    return _PROMPT_TEMPLATE.format(resume=resume, job_description=job_description)
