LLAMA_SERVER_URL = "http://localhost:8080/v1/chat/completions"
OLLAMA_URL = "http://localhost:11434"

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_CLAUDE_MODEL = "claude-3-5-sonnet-20240620"
DEFAULT_GROK_MODEL = "grok-beta"
DEFAULT_OLLAMA_MODEL = "qwen2.5-coder:14b"
DEFAULT_LLAMA_MODEL = "qwen2.5-coder:3b"

GROK_BASE_URL = "https://api.x.ai/v1"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

# Plaintext source files the upload picker accepts
ACCEPTED_EXTENSIONS = (
    ".js", ".jsx", ".ts", ".tsx", ".py", ".java",
    ".cpp", ".c", ".php", ".rb", ".go", ".rs",
)

MISSING_FIELDS_ERROR = "Code and review type are required"
UNSUPPORTED_REVIEW_TYPE_ERROR = "Unsupported review type"
INTERNAL_SERVER_ERROR = "Internal server error"
NO_ANALYSIS_GENERATED = "No analysis generated"

REVIEW_PROMPT = """You are an expert code reviewer. Analyze this code and provide comprehensive feedback on:
- Code quality and best practices
- Performance considerations
- Security implications
- Maintainability
- Overall assessment

Code to review:
{code}

Please provide detailed, constructive feedback."""

ERRORS_PROMPT = """You are a bug detection expert. Analyze this code and identify:
- Syntax errors
- Logic errors
- Runtime errors
- Potential exceptions
- Edge cases that might cause issues

Code to analyze:
{code}

Focus specifically on finding bugs and potential issues."""

IMPROVEMENTS_PROMPT = """You are a code optimization expert. Analyze this code and suggest:
- Performance optimizations
- Better algorithms or data structures
- Code readability improvements
- Memory usage optimizations
- Best practice implementations

Code to optimize:
{code}

Focus on actionable improvements that will make the code better."""

REFACTOR_PROMPT = """You are a refactoring expert. Analyze this code and suggest:
- Structural improvements
- Design pattern applications
- Code organization enhancements
- Modularity improvements
- Clean code principles

Code to refactor:
{code}

Provide specific refactoring suggestions with examples where possible."""
