"""
Static question bank for MockPrep

Two tables:
- QUESTION_BANK: role -> difficulty -> category -> entries
- FREQUENTLY_ASKED: role -> category -> entries asked at named companies

The ("Software Engineer", "Entry Level") cell is the final fallback for
selection and must never be empty.
"""

from mockprep.models.question import QuestionBankEntry

FALLBACK_ROLE = "Software Engineer"
FALLBACK_DIFFICULTY = "Entry Level"


def _entries(prefix: str, category: str, items: list[tuple[str, str]]) -> list[QuestionBankEntry]:
    return [
        QuestionBankEntry(id=f"{prefix}_{i}", text=text, category=category, variant_type=variant)
        for i, (text, variant) in enumerate(items, 1)
    ]


def _faq(prefix: str, category: str, items: list[tuple[str, str, str]]) -> list[QuestionBankEntry]:
    return [
        QuestionBankEntry(
            id=f"{prefix}_{i}", text=text, category=category, variant_type=variant, company=company
        )
        for i, (text, company, variant) in enumerate(items, 1)
    ]


# ============================================================================
# SOFTWARE ENGINEER
# ============================================================================

_SOFTWARE_ENGINEER = {
    "Entry Level": {
        "Technical": _entries("se_entry_tech", "Technical", [
            ("Explain the difference between synchronous and asynchronous programming with real examples.", "concept"),
            ("How would you handle concurrent operations in a web application?", "implementation"),
            ("Describe a scenario where you'd choose asynchronous processing over synchronous.", "decision"),
            ("Explain how you'd implement a rate-limiting system for an API.", "system-design"),
            ("How would you design a system to handle thousands of simultaneous user requests?", "scalability"),
            ("What's the difference between SQL and NoSQL databases? When would you use each?", "concept"),
            ("Explain how REST APIs work and what makes them RESTful.", "concept"),
            ("How would you optimize a slow database query?", "optimization"),
        ]),
        "Problem Solving": _entries("se_entry_prob", "Problem Solving", [
            ("Walk me through your approach to debugging a piece of code that's not working as expected.", "methodology"),
            ("Describe your debugging methodology when faced with a complex bug in production.", "crisis"),
            ("How do you systematically troubleshoot code that's failing in ways you don't understand?", "systematic"),
            ("Explain your process for identifying and fixing performance bottlenecks in code.", "performance"),
            ("What's your strategy when debugging code written by someone else that you've never seen before?", "legacy"),
            ("How would you approach solving a problem you've never encountered before?", "unknown"),
            ("Describe how you break down complex problems into smaller, manageable pieces.", "decomposition"),
        ]),
        "Behavioral": _entries("se_entry_beh", "Behavioral", [
            ("Tell me about a time you had to optimize code for better performance.", "achievement"),
            ("Describe a challenging technical problem you solved and your approach.", "challenge"),
            ("How do you stay updated with new technologies and programming trends?", "learning"),
            ("Explain a situation where you had to learn a new framework quickly.", "adaptability"),
            ("Describe your experience with code reviews and how you handle feedback.", "collaboration"),
            ("Tell me about a time you made a mistake in your code. How did you handle it?", "failure"),
            ("Describe a situation where you had to work with a difficult team member.", "conflict"),
        ]),
        "System Design": _entries("se_entry_sys", "System Design", [
            ("Design a simple caching system and explain your design decisions.", "basic-design"),
            ("How would you implement a basic load balancer from scratch?", "infrastructure"),
            ("Describe how you'd build a real-time notification system.", "real-time"),
            ("Design a URL shortening service like bit.ly - what are the key components?", "service-design"),
            ("How would you architect a simple chat application to handle 1000 concurrent users?", "scalability"),
        ]),
        "Communication": _entries("se_entry_comm", "Communication", [
            ("How would you explain APIs to a non-technical person?", "explanation"),
            ("What's your approach to writing maintainable, clean code?", "best-practices"),
            ("How do you ensure your code is secure and follows best practices?", "security"),
            ("Describe your testing strategy for a new feature.", "testing"),
            ("How would you handle a situation where your code caused a production outage?", "crisis-communication"),
        ]),
    },
    "Mid Level": {
        "Technical": _entries("se_mid_tech", "Technical", [
            ("How would you design idempotent endpoints for a payment API?", "implementation"),
            ("Explain how database indexes work internally and when they hurt write performance.", "concept"),
            ("Compare optimistic and pessimistic locking and describe when you'd use each.", "decision"),
            ("How would you migrate a monolith's database schema without downtime?", "migration"),
            ("Explain how you'd implement retries with backoff for calls to an unreliable service.", "resilience"),
            ("What trade-offs do you weigh when choosing between a message queue and direct service calls?", "decision"),
        ]),
        "Problem Solving": _entries("se_mid_prob", "Problem Solving", [
            ("A service's p99 latency doubled after a deploy with no obvious code change. How do you investigate?", "crisis"),
            ("How would you track down a memory leak in a long-running service?", "systematic"),
            ("Walk me through how you'd diagnose intermittent test failures in CI.", "methodology"),
            ("How would you approach reducing the cost of a cloud workload by 30%?", "optimization"),
            ("Describe your approach to untangling a module that everyone is afraid to change.", "legacy"),
        ]),
        "Behavioral": _entries("se_mid_beh", "Behavioral", [
            ("Tell me about a time you pushed back on a technical decision. What happened?", "conflict"),
            ("Describe a project where requirements changed late. How did you adapt?", "adaptability"),
            ("Tell me about a time you mentored a junior engineer through a hard problem.", "mentorship"),
            ("Describe a time you had to balance technical debt against a delivery deadline.", "trade-off"),
            ("Tell me about a production incident you owned end to end.", "ownership"),
        ]),
        "System Design": _entries("se_mid_sys", "System Design", [
            ("Design a rate limiter shared across a fleet of API servers.", "distributed"),
            ("Design the backend for a news feed that serves millions of users.", "service-design"),
            ("How would you design a job scheduler that guarantees each job runs exactly once?", "reliability"),
            ("Design a file upload service that handles multi-gigabyte files.", "storage"),
            ("Design a system that sends personalized email digests to millions of users every morning.", "batch"),
        ]),
        "Communication": _entries("se_mid_comm", "Communication", [
            ("How would you explain a major architecture change to product and business stakeholders?", "explanation"),
            ("How do you write a design document that reviewers actually read?", "documentation"),
            ("How do you communicate an expected delay to your manager and your users?", "expectation"),
            ("Describe how you run a blameless postmortem.", "incident"),
        ]),
    },
    "Senior Level": {
        "Technical": _entries("se_senior_tech", "Technical", [
            ("How would you guarantee consistency across services without distributed transactions?", "distributed"),
            ("Explain the trade-offs between strong and eventual consistency for a global product.", "concept"),
            ("How would you design a multi-region deployment strategy with safe rollbacks?", "infrastructure"),
            ("How do you decide when to split a service and when to merge services back together?", "architecture"),
            ("Explain how you'd approach capacity planning for a system that grows 5x in a year.", "scalability"),
        ]),
        "Problem Solving": _entries("se_senior_prob", "Problem Solving", [
            ("Your primary database is at 90% capacity and growing. Walk me through your plan.", "crisis"),
            ("How would you lead the investigation of a cascading failure across several teams' services?", "systematic"),
            ("How do you decide between rewriting a legacy system and incrementally refactoring it?", "decision"),
            ("How would you reduce deployment lead time from weeks to hours for a large organization?", "process"),
        ]),
        "Behavioral": _entries("se_senior_beh", "Behavioral", [
            ("Tell me about a technical strategy you set that other teams adopted.", "leadership"),
            ("Describe a time you had to say no to a senior stakeholder. How did you handle it?", "conflict"),
            ("Tell me about the hardest architectural decision you've made and how it played out.", "challenge"),
            ("Describe a time you grew an engineer into a technical lead.", "mentorship"),
        ]),
        "System Design": _entries("se_senior_sys", "System Design", [
            ("Design a globally distributed key-value store.", "distributed"),
            ("Design a ride-sharing dispatch system for a city of ten million people.", "real-time"),
            ("Design a metrics and alerting platform for thousands of services.", "observability"),
            ("Design a payments ledger that never loses or double-counts money.", "reliability"),
            ("Design a search system for a catalog of a billion products.", "search"),
        ]),
        "Communication": _entries("se_senior_comm", "Communication", [
            ("How do you align several teams on a shared technical roadmap?", "alignment"),
            ("How would you present a costly platform investment to executives?", "executive"),
            ("How do you build an engineering culture of code quality without slowing delivery?", "culture"),
        ]),
    },
}


# ============================================================================
# PRODUCT MANAGER
# ============================================================================

_PRODUCT_MANAGER = {
    "Entry Level": {
        "Product Sense": _entries("pm_entry_prod", "Product Sense", [
            ("What is your favorite product and how would you improve it?", "critique"),
            ("How would you decide which of three feature requests to build first?", "prioritization"),
            ("Design an app that helps students manage their study time.", "design"),
            ("How would you define success for a new onboarding flow?", "metrics"),
        ]),
        "Analytical": _entries("pm_entry_anl", "Analytical", [
            ("Daily active users dropped 10% overnight. How do you investigate?", "diagnosis"),
            ("Estimate the number of coffee cups sold in a large city each day.", "estimation"),
            ("Which metrics would you track for a food delivery app?", "metrics"),
        ]),
        "Behavioral": _entries("pm_entry_beh", "Behavioral", [
            ("Tell me about a time you influenced a decision without authority.", "influence"),
            ("Describe a time you had to work with incomplete information.", "ambiguity"),
            ("Tell me about a project that failed. What did you learn?", "failure"),
        ]),
    },
    "Mid Level": {
        "Product Sense": _entries("pm_mid_prod", "Product Sense", [
            ("How would you build a product roadmap for the next two quarters with limited engineering capacity?", "roadmap"),
            ("How would you decide whether to launch an MVP or wait for a complete feature set?", "launch"),
            ("Design a feature to increase retention for a subscription music service.", "design"),
            ("A competitor launched a feature your users are asking for. What do you do?", "strategy"),
        ]),
        "Analytical": _entries("pm_mid_anl", "Analytical", [
            ("An A/B test shows higher conversion but lower retention. How do you decide?", "experimentation"),
            ("How would you set KPIs for a marketplace with two sides?", "metrics"),
            ("Estimate the revenue impact of reducing checkout time by one second.", "estimation"),
        ]),
        "Behavioral": _entries("pm_mid_beh", "Behavioral", [
            ("Tell me about a time stakeholders disagreed on priorities. How did you resolve it?", "conflict"),
            ("Describe a time you used data to change a leader's mind.", "influence"),
            ("Tell me about a time you had to cut scope to hit a deadline.", "trade-off"),
        ]),
    },
    "Senior Level": {
        "Product Sense": _entries("pm_senior_prod", "Product Sense", [
            ("How would you set a three-year product vision for a mature product with slowing growth?", "vision"),
            ("Should a successful consumer product expand into enterprise? How would you decide?", "strategy"),
            ("How would you structure a platform team that serves several product lines?", "organization"),
        ]),
        "Analytical": _entries("pm_senior_anl", "Analytical", [
            ("How would you build a pricing strategy for a new market?", "pricing"),
            ("Revenue is flat while usage grows. Walk me through your analysis.", "diagnosis"),
            ("How would you decide which markets to enter next?", "market"),
        ]),
        "Behavioral": _entries("pm_senior_beh", "Behavioral", [
            ("Tell me about a time you killed a product or feature. How did you get buy-in?", "leadership"),
            ("Describe how you've developed other product managers.", "mentorship"),
            ("Tell me about a bet you made that didn't pay off.", "failure"),
        ]),
    },
}


# ============================================================================
# DATA SCIENTIST
# ============================================================================

_DATA_SCIENTIST = {
    "Entry Level": {
        "Technical": _entries("ds_entry_tech", "Technical", [
            ("Explain the bias-variance trade-off with an example.", "concept"),
            ("What is the difference between correlation and causation?", "concept"),
            ("How would you handle missing values in a dataset?", "implementation"),
            ("Explain how logistic regression works.", "concept"),
        ]),
        "Analytical": _entries("ds_entry_anl", "Analytical", [
            ("How would you design an A/B test for a new button color?", "experimentation"),
            ("How would you tell whether a metric change is statistically significant?", "statistics"),
            ("Walk me through exploring a dataset you've never seen before.", "methodology"),
        ]),
        "Behavioral": _entries("ds_entry_beh", "Behavioral", [
            ("Tell me about a data project you're proud of.", "achievement"),
            ("Describe a time your analysis led to a surprising conclusion.", "insight"),
            ("How do you explain a model's results to a non-technical audience?", "communication"),
        ]),
    },
    "Mid Level": {
        "Technical": _entries("ds_mid_tech", "Technical", [
            ("How would you detect and handle data leakage in a model pipeline?", "implementation"),
            ("Compare gradient boosting and random forests. When would you choose each?", "decision"),
            ("How would you build a model for a heavily imbalanced classification problem?", "modeling"),
            ("How do you monitor a model in production for drift?", "production"),
        ]),
        "Analytical": _entries("ds_mid_anl", "Analytical", [
            ("An experiment shows a significant lift but the effect disappears after launch. Why might that be?", "experimentation"),
            ("How would you estimate the causal effect of a feature that can't be A/B tested?", "causal"),
            ("How would you build a churn model and decide whether it's good enough to ship?", "modeling"),
        ]),
        "Behavioral": _entries("ds_mid_beh", "Behavioral", [
            ("Tell me about a time a model you built failed in production.", "failure"),
            ("Describe a time you had to push back on a stakeholder's hypothesis.", "conflict"),
            ("Tell me about a time you turned an ambiguous question into a concrete analysis.", "ambiguity"),
        ]),
    },
    "Senior Level": {
        "Technical": _entries("ds_senior_tech", "Technical", [
            ("Design a recommendation system for an e-commerce site with millions of items.", "system-design"),
            ("How would you design an experimentation platform for a large organization?", "platform"),
            ("How do you decide between a simple heuristic and a complex model for a business problem?", "decision"),
        ]),
        "Analytical": _entries("ds_senior_anl", "Analytical", [
            ("How would you measure the long-term impact of a change when short-term metrics disagree?", "strategy"),
            ("How would you set up a metric hierarchy for an entire company?", "metrics"),
            ("Several experiments interact with each other. How do you analyze the results?", "experimentation"),
        ]),
        "Behavioral": _entries("ds_senior_beh", "Behavioral", [
            ("Tell me about a time you set the data strategy for a team or product.", "leadership"),
            ("Describe how you've grown a data science team's impact.", "mentorship"),
            ("Tell me about a hypothesis you championed that turned out to be wrong.", "failure"),
        ]),
    },
}


QUESTION_BANK: dict[str, dict[str, dict[str, list[QuestionBankEntry]]]] = {
    "Software Engineer": _SOFTWARE_ENGINEER,
    "Product Manager": _PRODUCT_MANAGER,
    "Data Scientist": _DATA_SCIENTIST,
}


# Frequently asked interview questions from top companies
FREQUENTLY_ASKED: dict[str, dict[str, list[QuestionBankEntry]]] = {
    "Software Engineer": {
        "Technical": _faq("faq_tech", "Technical", [
            ("Reverse a linked list iteratively and recursively.", "Google", "coding"),
            ("Find the longest substring without repeating characters.", "Facebook", "coding"),
            ("Implement a LRU cache with O(1) operations.", "Amazon", "coding"),
            ("Design a parking lot system.", "Microsoft", "system-design"),
            ("How would you detect a cycle in a linked list?", "Apple", "coding"),
            ("Explain the difference between processes and threads.", "Netflix", "concept"),
            ("How does garbage collection work in your preferred language?", "Uber", "concept"),
            ("Design a distributed cache system.", "Airbnb", "system-design"),
        ]),
        "Behavioral": _faq("faq_beh", "Behavioral", [
            ("Tell me about a time you disagreed with your manager.", "Amazon", "conflict"),
            ("Describe a time you failed and what you learned from it.", "Google", "failure"),
            ("Tell me about your most challenging project.", "Facebook", "challenge"),
            ("How do you handle tight deadlines and pressure?", "Microsoft", "pressure"),
            ("Describe a time you had to learn something completely new.", "Apple", "learning"),
        ]),
    },
    "Product Manager": {
        "Product Sense": _faq("faq_pm_prod", "Product Sense", [
            ("How would you improve Google Maps?", "Google", "critique"),
            ("Design a product for elderly people to stay connected with family.", "Facebook", "design"),
            ("How would you measure the success of Prime Video?", "Amazon", "metrics"),
        ]),
        "Behavioral": _faq("faq_pm_beh", "Behavioral", [
            ("Tell me about a time you made a decision with customer obsession in mind.", "Amazon", "values"),
            ("Describe the most impactful product you've shipped.", "Microsoft", "achievement"),
        ]),
    },
    "Data Scientist": {
        "Analytical": _faq("faq_ds_anl", "Analytical", [
            ("How would you measure the success of Facebook Groups?", "Facebook", "metrics"),
            ("How would you detect fake reviews?", "Amazon", "modeling"),
            ("How would you evaluate a change to the ranking of search results?", "Google", "experimentation"),
        ]),
        "Technical": _faq("faq_ds_tech", "Technical", [
            ("Explain how you would build a model to predict ride ETAs.", "Uber", "modeling"),
            ("How does regularization prevent overfitting?", "Netflix", "concept"),
        ]),
    },
}


def get_role_bank(job_role: str) -> dict[str, dict[str, list[QuestionBankEntry]]]:
    """Get the bank for a role, falling back to the default role."""
    return QUESTION_BANK.get(job_role) or QUESTION_BANK[FALLBACK_ROLE]


def get_difficulty_cell(
    job_role: str,
    *difficulties: str,
) -> dict[str, list[QuestionBankEntry]]:
    """
    Get the category table for the first difficulty the role has.

    Falls back to the role's entry-level cell, then to the default cell.
    """
    role_bank = get_role_bank(job_role)
    for difficulty in difficulties:
        cell = role_bank.get(difficulty)
        if cell:
            return cell
    return role_bank.get(FALLBACK_DIFFICULTY) or QUESTION_BANK[FALLBACK_ROLE][FALLBACK_DIFFICULTY]


def get_frequently_asked(job_role: str, category: str | None = None) -> list[QuestionBankEntry]:
    """Get frequently asked questions for a role, optionally for one category."""
    role_faq = FREQUENTLY_ASKED.get(job_role, {})
    if category:
        return list(role_faq.get(category, []))
    return [entry for entries in role_faq.values() for entry in entries]


def get_category_for_question(question: str) -> str:
    """Classify arbitrary question text into a display category."""
    lower_question = question.lower()

    if any(kw in lower_question for kw in ("design", "architect", "system")):
        return "System Design"
    if any(kw in lower_question for kw in ("team", "time", "challenge", "tell me about")):
        return "Behavioral"
    if any(kw in lower_question for kw in ("technical", "code", "algorithm")):
        return "Technical"
    if any(kw in lower_question for kw in ("strategy", "business", "market")):
        return "Strategic"
    if any(kw in lower_question for kw in ("data", "model", "analysis")):
        return "Analytical"
    return "Problem-Solving"


def all_entry_ids() -> list[str]:
    """Every id in both tables, used to check bank integrity."""
    ids = [
        entry.id
        for role_bank in QUESTION_BANK.values()
        for cell in role_bank.values()
        for entries in cell.values()
        for entry in entries
    ]
    ids.extend(
        entry.id
        for role_faq in FREQUENTLY_ASKED.values()
        for entries in role_faq.values()
        for entry in entries
    )
    return ids


def get_role_categories(job_role: str) -> list[str]:
    """Bank categories offered for a role, in bank order."""
    categories: list[str] = []
    for cell in get_role_bank(job_role).values():
        for category in cell:
            if category not in categories:
                categories.append(category)
    return categories
