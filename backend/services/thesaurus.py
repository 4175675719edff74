"""Static concept thesaurus and flat term vocabulary.

Tables are process-wide constants and are never mutated. Their iteration
order is part of the matching behavior: concept extraction walks them
top to bottom, and ``family_of`` returns the first family that claims a
term.
"""

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Canonical concept -> related surface terms (analyzer variant)
# ---------------------------------------------------------------------------
CONCEPT_THESAURUS: dict[str, tuple[str, ...]] = {
    "api development": (
        "rest", "restful", "graphql", "rest api", "api", "endpoint", "web service",
        "http", "json", "xml", "swagger", "openapi", "api design", "api gateway",
        "serverless", "lambda",
    ),
    "frontend development": (
        "react", "vue", "angular", "next", "gatsby", "svelte", "nuxt", "ui", "ux",
        "user interface", "web design", "html", "css", "responsive design",
        "user experience", "web components", "jsx", "tsx", "tailwind", "bootstrap",
        "material ui",
    ),
    "backend development": (
        "node.js", "nodejs", "express", "django", "flask", "fastapi", "java",
        "spring", "laravel", "server", "backend", "api server", "business logic",
        "data processing", "postgresql", "mysql", "database",
    ),
    "frontend frameworks": (
        "react", "react.js", "vue", "vue.js", "angular", "angularjs", "next.js",
        "nextjs", "gatsby", "svelte", "nuxt", "nuxt.js", "ember", "backbone",
    ),
    "backend frameworks": (
        "express", "express.js", "django", "django rest", "flask", "fastapi",
        "spring", "spring boot", "laravel", "rails", "ruby on rails", "asp.net",
        "asp.net core",
    ),
    "mobile development": (
        "react native", "flutter", "ios", "android", "swift", "kotlin", "xamarin",
        "mobile app", "cross-platform", "native app", "hybrid app", "app development",
    ),
    "cloud computing": (
        "aws", "azure", "gcp", "google cloud", "cloud", "ec2", "lambda", "s3", "rds",
        "cloudformation", "cloud infrastructure", "serverless", "cloud services",
        "ibm cloud", "oracle cloud",
    ),
    "containerization": (
        "docker", "container", "dockerfile", "registry", "orchestration", "compose",
        "container registry", "image registry", "containerized application",
    ),
    "kubernetes": (
        "k8s", "pods", "helm", "deployment", "ingress", "service", "cluster",
        "orchestration", "container orchestration", "kube", "kubectl",
    ),
    "devops": (
        "ci/cd", "continuous integration", "continuous deployment", "jenkins",
        "gitlab ci", "github actions", "pipeline", "automation", "infrastructure",
        "infrastructure as code", "iac", "terraform", "ansible", "deployment",
        "monitoring",
    ),
    "database design": (
        "sql", "nosql", "mongodb", "postgresql", "postgres", "mysql", "database",
        "schema", "normalization", "indexes", "query optimization", "database design",
        "relational", "document database", "dynamo db",
    ),
    "testing": (
        "unit test", "integration test", "jest", "mocha", "pytest", "testing", "qunit",
        "cucumber", "selenium", "test automation", "tdd", "bdd", "e2e test",
        "end to end testing", "test driven development",
    ),
    "version control": (
        "git", "github", "gitlab", "bitbucket", "svn", "version control", "scm",
        "commit", "branch", "merge", "git flow", "pull request", "merge request",
    ),
    "agile methodology": (
        "agile", "scrum", "kanban", "sprint", "jira", "confluence", "waterfall",
        "lean", "xp", "extreme programming", "scrumban", "agile development",
    ),
    "machine learning": (
        "ml", "machine learning", "deep learning", "neural network", "tensorflow",
        "pytorch", "scikit-learn", "keras", "ai", "artificial intelligence", "nlp",
        "computer vision", "model", "training", "prediction",
    ),
    "data analysis": (
        "data", "analytics", "pandas", "numpy", "matplotlib", "plotly", "excel",
        "pivot table", "statistical analysis", "data visualization", "data science",
        "analytics",
    ),
    "security": (
        "authentication", "authorization", "encryption", "ssl", "https", "jwt",
        "oauth", "security", "firewall", "intrusion detection", "vulnerability",
        "penetration testing", "security scanning", "secure coding",
    ),
    "performance optimization": (
        "optimization", "performance", "caching", "cdn", "lazy loading",
        "code splitting", "minification", "compression", "performance monitoring",
        "profiling", "optimization technique",
    ),
    "microservices": (
        "microservices", "service", "distributed", "service mesh", "istio", "consul",
        "architecture", "service architecture", "microservice architecture",
    ),
    "system design": (
        "architecture", "system design", "design pattern", "scalability",
        "availability", "distributed system", "load balancing", "caching",
        "partitioning", "architectural pattern",
    ),
    "documentation": (
        "documentation", "readme", "javadoc", "swagger", "openapi",
        "technical writing", "api documentation", "wiki", "confluence", "docs",
    ),
    "communication": (
        "communication", "presentation", "documentation", "technical writing",
        "speaking", "reporting", "stakeholder management", "collaboration",
    ),
    "leadership": (
        "leadership", "management", "team lead", "mentor", "coaching", "delegation",
        "supervision", "team management", "people management",
    ),
    "problem solving": (
        "problem solving", "analytical", "debugging", "troubleshooting",
        "critical thinking", "logic", "analytical thinking",
    ),
    "collaboration": (
        "collaboration", "teamwork", "coordination", "partnership", "cooperation",
        "cross-functional", "team collaboration",
    ),
    "web technologies": (
        "html", "css", "javascript", "dom", "web api", "web socket", "rest", "http",
        "https", "web standards",
    ),
    "build tools": (
        "webpack", "vite", "rollup", "parcel", "gulp", "grunt", "build", "bundler",
        "module bundler", "build tool",
    ),
    "package managers": (
        "npm", "yarn", "pnpm", "pip", "maven", "gradle", "package manager",
        "dependency management",
    ),
    "cli development": (
        "cli", "command line", "console", "terminal", "bash", "shell script",
        "command-line tool", "cli tool",
    ),
    "rest api": (
        "rest", "restful", "rest api", "http method", "get", "post", "put", "delete",
        "crud", "endpoint", "resource",
    ),
    "graphql": (
        "graphql", "apollo", "query", "mutation", "subscription", "schema",
        "schema design", "query language",
    ),
    "message queue": (
        "message queue", "kafka", "rabbitmq", "redis", "queue", "pub/sub",
        "publish subscribe", "asynchronous messaging",
    ),
    "monitoring": (
        "monitoring", "logging", "prometheus", "grafana", "elk stack", "datadog",
        "observability", "metrics", "alerting",
    ),
    "ci-cd pipeline": (
        "ci/cd", "jenkins", "gitlab", "github", "circle ci", "travis", "pipeline",
        "continuous integration", "continuous deployment", "automation",
    ),
}

# ---------------------------------------------------------------------------
# Coarser family table used by the bulk ranker's lightweight matcher.
# Keys may contain "_" which is reported as a space ("ai_ml" -> "ai ml").
# ---------------------------------------------------------------------------
RANKER_THESAURUS: dict[str, tuple[str, ...]] = {
    "frontend": (
        "react", "vue", "angular", "svelte", "html", "css", "sass", "less",
        "bootstrap", "tailwind", "javascript", "typescript", "responsive", "ui", "ux",
        "jsx", "tsx",
    ),
    "backend": (
        "nodejs", "node.js", "python", "java", "spring", "django", "flask", "fastapi",
        "laravel", "rails", "api", "rest", "graphql", "express",
    ),
    "database": (
        "sql", "mongodb", "postgresql", "mysql", "firebase", "redis", "nosql",
        "elasticsearch", "cassandra", "oracle", "mariadb",
    ),
    "devops": (
        "docker", "kubernetes", "ci/cd", "jenkins", "gitlab", "github actions",
        "terraform", "ansible", "aws", "gcp", "azure", "automation",
    ),
    "cloud": (
        "aws", "azure", "gcp", "cloud", "serverless", "lambda", "ec2", "s3",
        "cloudflare", "heroku",
    ),
    "testing": (
        "jest", "pytest", "junit", "testing", "unit test", "integration test", "e2e",
        "test", "mocha", "rspec", "cucumber",
    ),
    "version control": (
        "git", "github", "gitlab", "bitbucket", "svn", "version control", "scm",
    ),
    "tools": (
        "webpack", "vite", "babel", "npm", "yarn", "pnpm", "maven", "gradle",
        "parcel", "rollup",
    ),
    "communication": (
        "communication", "collaboration", "teamwork", "presentation", "writing",
        "documentation",
    ),
    "leadership": (
        "leadership", "management", "mentoring", "coaching", "delegation", "team lead",
    ),
    "problem solving": (
        "problem solving", "debugging", "optimization", "critical thinking",
        "analysis", "troubleshooting",
    ),
    "mobile": (
        "react native", "flutter", "swift", "kotlin", "android", "ios",
        "mobile development", "xamarin",
    ),
    "ai_ml": (
        "machine learning", "deep learning", "tensorflow", "pytorch", "keras",
        "scikit-learn", "ai", "nlp", "cv", "artificial intelligence", "data science",
    ),
    "security": (
        "security", "encryption", "ssl", "tls", "authentication", "authorization",
        "jwt", "oauth", "penetration testing",
    ),
}

# ---------------------------------------------------------------------------
# Individual technical / soft terms added verbatim (not canonicalized)
# ---------------------------------------------------------------------------
TECHNICAL_TERMS: tuple[str, ...] = (
    # Languages
    "javascript", "typescript", "python", "java", "c++", "c#", "go", "rust", "ruby",
    "php", "r", "scala",
    # Frontend frameworks
    "react", "vue", "angular", "svelte", "nextjs", "nuxtjs", "gatsby", "ember",
    # Backend frameworks
    "nodejs", "express", "django", "flask", "fastapi", "spring", "laravel", "rails",
    # Data stores
    "sql", "mongodb", "postgresql", "mysql", "firebase", "dynamodb", "cassandra",
    "oracle",
    # Hosting
    "aws", "azure", "gcp", "heroku", "vercel", "netlify", "digitalocean",
    # CI and containers
    "docker", "kubernetes", "jenkins", "gitlab", "github", "circleci", "travis",
    # Build and packaging
    "git", "webpack", "vite", "rollup", "parcel", "babel", "npm", "yarn", "pnpm",
    "maven", "gradle",
    # Styling
    "html", "css", "sass", "less", "bootstrap", "tailwind", "material ui",
    "ant design",
    # Protocols
    "graphql", "rest", "soap", "grpc", "websocket",
    # Identity
    "jwt", "oauth", "oauth2", "saml", "ldap", "kerberos",
    # Messaging and caching
    "redis", "rabbitmq", "kafka", "elasticsearch", "memcached", "apache", "nginx",
    # Test frameworks
    "junit", "pytest", "mocha", "jest", "rspec", "cucumber", "selenium",
    # Process and trackers
    "agile", "scrum", "kanban", "jira", "confluence", "asana", "trello",
    # Operating systems
    "linux", "windows", "macos", "unix", "centos", "ubuntu", "debian",
    # Infrastructure as code
    "terraform", "ansible", "puppet", "chef", "vagrant",
    # Observability
    "prometheus", "grafana", "datadog", "newrelic", "elk", "splunk",
    # ML libraries
    "tensorflow", "pytorch", "keras", "scikit-learn", "pandas", "numpy",
    # Architecture and data
    "microservices", "rest api", "database", "nosql", "relational", "document",
    "time-series",
    # Security
    "authentication", "authorization", "encryption", "ssl", "tls",
    # Testing practice
    "testing", "unit test", "integration test", "e2e test", "tdd", "bdd",
    # Delivery
    "devops", "ci/cd", "continuous integration", "continuous deployment",
    "cloud", "serverless", "iaas", "paas", "saas",
    "architecture", "design pattern", "monolith",
    "performance", "scalability", "availability", "reliability",
    # Soft skills
    "leadership", "management", "mentoring", "coaching",
    "waterfall",
    "communication", "documentation", "presentation", "writing",
    "problem solving", "debugging", "optimization",
)


@dataclass(frozen=True)
class ConceptFamily:
    category: str
    related_terms: tuple[str, ...]


def display_name(key: str) -> str:
    """Table keys use "_" where the reported concept name has a space."""
    return key.replace("_", " ")


def family_of(
    term: str,
    thesaurus: dict[str, tuple[str, ...]] = CONCEPT_THESAURUS,
) -> ConceptFamily | None:
    """Return the first family whose key is ``term`` or lists it as related."""
    for key, related in thesaurus.items():
        if key == term or term in related:
            return ConceptFamily(category=key, related_terms=related)
    return None
