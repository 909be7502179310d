"""Resume Rewriter - tailors a resume to a job description as section-marked text."""

from __future__ import annotations

import logging

from resume_matcher.clients.llm_client import DEFAULT_MODEL, LLMClient
from resume_matcher.pipeline.analyzer import build_user_prompt

logger = logging.getLogger(__name__)

LENGTH_GUIDANCE = {
    1: """\
TARGET LENGTH: exactly 1 page.
- Include only the 2-3 most recent / relevant positions; omit older or less-relevant roles.
- Limit each position to 2-3 bullets max; keep every bullet under 15 words.
- Summary: 2 sentences only.
- Skills: one combined line per category; omit rarely-relevant tools.""",
    2: """\
TARGET LENGTH: up to 2 pages.
- Include all positions from the original resume.
- Up to 4-5 bullets per position; quantify results wherever the original resume supports it.
- Summary: 3 sentences.
- Skills: full categorised list.""",
}

MAX_TOKENS = {1: 1800, 2: 3000}

SYSTEM_PROMPT_TEMPLATE = """\
You are an expert resume writer and career coach.
Rewrite and tailor the provided resume so it is optimally positioned for the given job description.
Return ONLY the resume content using the exact section markers shown below - no preamble, no commentary.

{length_guidance}

Use this format verbatim:

[NAME]
Full Name
Target Job Title

[CONTACT]
email@example.com | (555) 000-0000 | City, State | linkedin.com/in/handle

[SUMMARY]
Two to three sentences positioning the candidate specifically for this role. Reference their strongest matching qualifications and how they address the job's core needs.

[EXPERIENCE]
Job Title - Company Name | Start Year - End Year
- Accomplishment bullet emphasizing skills relevant to this JD
- Another bullet; quantify results where the original resume supports it

(repeat for every position in the original resume, subject to the TARGET LENGTH rule above)

[EDUCATION]
Degree - Institution | Year

[SKILLS]
Languages: list, of, skills
Frameworks: list, of, skills
Tools: list, of, skills

Rules:
- Preserve all factual information; never invent experience or credentials
- Reorder and reword bullets to surface JD-relevant skills first
- Use strong action verbs; match terminology used in the job description
- Use only standard ASCII characters (no smart quotes, em dashes, or bullet symbols)
- Keep bullets concise - no more than 18 words each"""


class ResumeRewriter:
    def __init__(self, llm: LLMClient, model: str = DEFAULT_MODEL):
        self.llm = llm
        self.model = model

    async def rewrite(self, resume_text: str, jd_text: str, pages: int = 1) -> str:
        """Return the tailored resume as [SECTION]-marked text."""
        if pages not in LENGTH_GUIDANCE:
            raise ValueError(f"pages must be 1 or 2, got {pages}")
        logger.info("Rewriting resume for a %d-page budget...", pages)
        response = await self.llm.generate(
            prompt=build_user_prompt(resume_text, jd_text),
            system=SYSTEM_PROMPT_TEMPLATE.format(length_guidance=LENGTH_GUIDANCE[pages]),
            model=self.model,
            temperature=0.3,
            max_tokens=MAX_TOKENS[pages],
        )
        return response.text.strip()
