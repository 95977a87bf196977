from samarthaa.core.modules.llm.models import DocumentContext, GenerateRequest, GenerationMode
from samarthaa.errors import ValidationError

DEFAULT_JURISDICTION = "All Indian Courts"
DEFAULT_APPLICABLE_LAWS = "Relevant Indian laws"

FORMAT_INSTRUCTIONS = """========================
FORMAT INSTRUCTIONS (MANDATORY)
========================
- Use ALL CAPS for the document title (first line only)
- Use numbered headings: 1., 2., 3.
- Use sub-headings: 1.1, 1.2, 2.1
- Each clause must start on a NEW LINE
- Leave ONE blank line between major sections
- Do NOT use markdown, bullets, or special symbols
- Do NOT use emojis or decorative characters
- Keep sentences concise and formal
- Output must be plain text suitable for printing
- End the document with a DISCLAIMER section
========================"""

ASSISTANT_SYSTEM_PROMPT = """You are SAMARTHAA, a senior Indian legal assistant with deep expertise in:
- Indian constitutional law, civil and criminal procedure
- Indian Contract Act 1872, Transfer of Property Act 1882, CPC, CrPC, IPC and other major Indian statutes
- Supreme Court and High Court judgments and precedents
- Corporate, family, property and labour law under Indian jurisdiction

Your communication style:
- Respond in clear, plain English that non-lawyers can understand
- Keep responses concise (3-5 sentences for simple questions, more for complex ones)
- Cite the relevant Indian law, section, or case when applicable
- When uncertain, say so clearly rather than guessing
- End complex answers with a practical next-step recommendation
- Suggest consulting a lawyer when the answer depends on confidential specifics

You are a voice assistant. Keep responses conversational and spoken-word friendly.
Avoid bullet points, markdown, or formatting and write in flowing sentences."""

DOCUMENT_LABELS = {
    GenerationMode.CONTRACT: "Legal Contract",
    GenerationMode.RESEARCH: "Case Law Research",
    GenerationMode.OPINION: "Legal Opinion",
}


def _require(*values: str | None, message: str) -> None:
    if not all(value and value.strip() for value in values):
        raise ValidationError(message)


def build_contract_prompt(contract_type: str, contract_details: str) -> str:
    return f"""You are an expert Indian legal professional specializing in contract drafting. \
Draft a {contract_type} according to Indian law in P Mogha format.

Contract Details & Key Terms:
{contract_details}

Requirements:
1. Use formal legal language appropriate for Indian courts
2. Include all standard clauses relevant to this contract type under Indian law
3. Reference applicable Indian statutes (Indian Contract Act 1872, Transfer of Property Act 1882, etc.)
4. Include proper execution clauses with witness requirements
5. Add jurisdiction and dispute resolution clauses suitable for Indian courts
6. Ensure compliance with Indian stamp duty and registration requirements where applicable
7. Format properly with clear sections and subsections
8. Include appropriate schedules/annexures if needed

Generate a complete, professional contract draft ready for lawyer review and customization.

{FORMAT_INSTRUCTIONS}"""


def build_research_prompt(legal_issue: str, research_query: str, jurisdiction: str | None) -> str:
    return f"""You are an expert Indian legal researcher. Conduct comprehensive case law research on the following matter.

Legal Issue:
{legal_issue}

Context:
{research_query}

Preferred Jurisdiction:
{jurisdiction or DEFAULT_JURISDICTION}

Please provide:
1. Relevant Case Law: landmark and recent cases with citations (Party Names, Citation, Court, Year)
2. Legal Principles: key principles established by these cases
3. Statutory Provisions: applicable sections of relevant acts
4. Analysis: how these cases apply to the query
5. Current Legal Position: the prevailing view
6. Practical Application: how courts typically rule on such matters

Focus on authoritative Indian Supreme Court and High Court judgments. Provide case citations in standard Indian format.

{FORMAT_INSTRUCTIONS}"""


def build_opinion_prompt(opinion_topic: str, opinion_query: str, applicable_laws: str | None) -> str:
    return f"""You are a senior Indian advocate providing a detailed legal opinion. Analyze the following matter comprehensively.

Topic:
{opinion_topic}

Facts:
{opinion_query}

Applicable Laws:
{applicable_laws or DEFAULT_APPLICABLE_LAWS}

Please provide a comprehensive legal opinion including:
1. Summary of Facts
2. Legal Issues
3. Applicable Law: statutes, sections, rules and regulations
4. Case Law Analysis: relevant precedents and current judicial trends
5. Legal Analysis: strengths, weaknesses, risks and counter-arguments
6. Opinion & Advice: likelihood of success, recommended and alternative courses of action
7. Practical Considerations: procedural steps, documentation, timeline and costs
8. Conclusion

Format this as a formal legal opinion suitable for client delivery. Be thorough, balanced, and cite relevant legal authorities.

{FORMAT_INSTRUCTIONS}"""


def build_generation_prompt(request: GenerateRequest) -> tuple[GenerationMode, str]:
    """Validate the form for its mode and build the document prompt.

    Raises:
        ValidationError: If the mode is unknown or a required field is empty
    """
    try:
        mode = GenerationMode(request.mode)
    except ValueError as e:
        raise ValidationError("Invalid mode. Must be contract, research, or opinion.") from e

    if mode == GenerationMode.CONTRACT:
        _require(request.contract_type, request.contract_details, message="contractType and contractDetails are required")
        return mode, build_contract_prompt(str(request.contract_type), str(request.contract_details))

    if mode == GenerationMode.RESEARCH:
        _require(request.legal_issue, request.research_query, message="legalIssue and researchQuery are required")
        return mode, build_research_prompt(str(request.legal_issue), str(request.research_query), request.jurisdiction)

    _require(request.opinion_topic, request.opinion_query, message="opinionTopic and opinionQuery are required")
    return mode, build_opinion_prompt(str(request.opinion_topic), str(request.opinion_query), request.applicable_laws)


def build_assistant_system_prompt(document_context: DocumentContext | None) -> str:
    """Assistant persona, plus the generated document when the user has one open."""
    if document_context is None or not document_context.content:
        return ASSISTANT_SYSTEM_PROMPT

    try:
        label = DOCUMENT_LABELS[GenerationMode(document_context.mode or "")]
    except ValueError:
        label = "Legal Document"

    return f"""{ASSISTANT_SYSTEM_PROMPT}

DOCUMENT CONTEXT: The user has generated the following {label} in this session. \
You can answer questions about it, explain its clauses, and provide related legal guidance:

--- START OF DOCUMENT ---
{document_context.content}
--- END OF DOCUMENT ---

When answering questions about this document, reference specific clauses or sections where relevant."""
