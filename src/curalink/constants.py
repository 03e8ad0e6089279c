"""Project-wide constants."""

# -- Base client defaults ---------------------------------------------------
# Matches aiohttp's own default total timeout; no per-upstream override.
DEFAULT_TIMEOUT: float = 300.0
USER_AGENT_TEMPLATE: str = "CuraLink/1.0 (mailto:{email})"

# -- Auth -------------------------------------------------------------------
JWT_ALGORITHM: str = "HS256"
TOKEN_EXPIRE_SECONDS: int = 7 * 86400  # 7 days
VALID_USER_TYPES: tuple[str, ...] = ("PATIENT", "RESEARCHER")
VALID_GENDERS: tuple[str, ...] = ("MALE", "FEMALE", "OTHER")

# -- PubMed / NCBI ----------------------------------------------------------
NCBI_BASE_URL: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
PUBMED_SEARCH_URL: str = f"{NCBI_BASE_URL}/esearch.fcgi"
PUBMED_SUMMARY_URL: str = f"{NCBI_BASE_URL}/esummary.fcgi"
PUBMED_ARTICLE_URL: str = "https://pubmed.ncbi.nlm.nih.gov/{pmid}/"
PUBMED_MAX_RESULTS: int = 10

# -- ClinicalTrials.gov -----------------------------------------------------
CLINICAL_TRIALS_BASE_URL: str = "https://clinicaltrials.gov/api/v2/studies"
CLINICAL_TRIALS_STUDY_URL: str = "https://clinicaltrials.gov/study/{nct_id}"
CLINICAL_TRIALS_PAGE_SIZE: int = 5
CLINICAL_TRIALS_DEFAULT_CONDITION: str = "cancer"

# -- ORCID ------------------------------------------------------------------
ORCID_API_URL: str = "https://pub.orcid.org/v3.0"
ORCID_PROFILE_URL: str = "https://orcid.org/{orcid}"
ORCID_MAX_PROFILES: int = 5
ORCID_MAX_WORKS: int = 3

# -- SerpApi ----------------------------------------------------------------
SERPAPI_SEARCH_URL: str = "https://serpapi.com/search.json"
RESEARCHGATE_SITE: str = "researchgate.net"

# -- Europe PMC -------------------------------------------------------------
EUROPE_PMC_SEARCH_URL: str = "https://www.ebi.ac.uk/europepmc/webservices/rest/search"
EUROPE_PMC_ARTICLE_URL: str = "https://europepmc.org/article/{source}/{id}"
EUROPE_PMC_PAGE_SIZE: int = 5
EUROPE_PMC_DEFAULT_TOPIC: str = "oncology"

# -- Semantic Scholar -------------------------------------------------------
SEMANTIC_SCHOLAR_AUTHOR_SEARCH_URL: str = (
    "https://api.semanticscholar.org/graph/v1/author/search"
)
SEMANTIC_SCHOLAR_LIMIT: int = 5
SEMANTIC_SCHOLAR_DEFAULT_QUERY: str = "AI research"

# -- NIH RePORTER -----------------------------------------------------------
NIH_REPORTER_SEARCH_URL: str = "https://api.reporter.nih.gov/v2/projects/search"
NIH_REPORTER_PROJECT_URL: str = "https://reporter.nih.gov/project-details/{project_num}"
NIH_REPORTER_LIMIT: int = 6
NIH_REPORTER_DEFAULT_QUERY: str = "cancer"
NIH_REPORTER_FIELDS: list[str] = [
    "project_num",
    "project_title",
    "agency",
    "award_amount",
    "organization.org_name",
    "principal_investigators.pi_name",
]

# -- Summarization ----------------------------------------------------------
SUMMARY_MAX_TOKENS: int = 500
SUMMARY_SYSTEM_PROMPT: str = "You are a helpful medical research assistant."
SUMMARY_PROMPT_TEMPLATE: str = (
    "Summarize and provide research, trials, experts, next steps for: {symptoms}"
)

# -- Placeholders -----------------------------------------------------------
MISSING_URL: str = "#"
