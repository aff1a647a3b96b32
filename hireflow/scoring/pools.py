"""
Static option pools for the scoring engine.

All pools are tuples built once at import time.  Indices into them are
derived from text hashes, so their order is part of the engine's
observable behaviour: reordering or editing an entry changes the output
for existing inputs.
"""

from __future__ import annotations

from types import MappingProxyType

from .schema import InterviewQuestion

STRENGTHS = (
    "Strong technical background with relevant industry experience",
    "Excellent communication skills demonstrated through past roles",
    "Proven leadership and team management capabilities",
    "Deep expertise in modern frameworks and technologies",
    "Strong problem-solving skills with analytical mindset",
    "Demonstrated ability to work in fast-paced environments",
    "Excellent track record of delivering projects on time",
    "Strong understanding of agile development methodologies",
    "Impressive portfolio with diverse project experience",
    "Solid educational background with continuous learning focus",
    "Experience with cloud infrastructure and DevOps practices",
    "Strong data analysis and visualization skills",
    "Excellent user research and design thinking experience",
    "Proven ability to drive product strategy and roadmap",
    "Cross-functional collaboration with engineering and design teams",
)

CONCERNS = (
    "Limited experience with the specific tech stack mentioned in requirements",
    "Gap in employment history that may need clarification",
    "No direct experience in the target industry vertical",
    "Could benefit from more leadership experience",
    "Resume lacks specific quantifiable achievements",
    "Limited remote work experience noted",
    "May require additional onboarding time for domain knowledge",
    "Experience is primarily with smaller team environments",
)

SUMMARY_TEMPLATES = (
    "This candidate brings {years} years of relevant experience with a strong focus on {area}. "
    "Their background in {skill} aligns well with the role requirements, and they demonstrate "
    "a clear trajectory of professional growth.",
    "A well-rounded professional with demonstrated expertise in {area}. The candidate shows "
    "strong potential for the role, particularly in {skill}, though some areas may benefit "
    "from additional development.",
    "An experienced candidate with solid credentials in {area}. Their resume highlights "
    "significant accomplishments in {skill}, making them a competitive applicant for this position.",
)

FOCUS_AREAS = (
    "software development",
    "product management",
    "user experience design",
    "cloud architecture",
    "data engineering",
    "frontend development",
    "backend systems",
    "DevOps and infrastructure",
    "full-stack development",
    "technical leadership",
)

FOCUS_SKILLS = (
    "React and TypeScript",
    "system design and architecture",
    "cross-functional team leadership",
    "cloud-native development",
    "data pipeline optimization",
    "user interface design",
    "API development and microservices",
    "CI/CD pipeline management",
    "agile project management",
    "performance optimization",
)

SKILLS = (
    "React", "TypeScript", "JavaScript", "Node.js", "Python", "Java", "Go",
    "SQL", "PostgreSQL", "MongoDB", "Redis", "Docker", "Kubernetes", "AWS",
    "GCP", "Azure", "GraphQL", "REST APIs", "CI/CD", "Git",
    "Agile", "Scrum", "TDD", "System Design", "Microservices",
    "Machine Learning", "Data Analysis", "CSS", "HTML", "Next.js",
    "Vue.js", "Angular", "Terraform", "Linux", "Communication",
    "Leadership", "Project Management", "Problem Solving", "Teamwork",
)

RECOMMENDATION_SUMMARIES = MappingProxyType({
    "strong_match": "Strongly recommended for this role. Candidate shows excellent alignment "
                    "across key requirements.",
    "good_match": "Recommended for next round. Candidate meets most requirements with minor gaps.",
    "partial_match": "Consider with reservations. Candidate meets some requirements but has "
                     "notable skill gaps.",
    "weak_match": "Not recommended at this time. Significant gaps between candidate profile "
                  "and job requirements.",
})

QUESTION_BANK = (
    InterviewQuestion(
        question="Walk me through a challenging technical project you led. What was the "
                 "architecture and how did you handle trade-offs?",
        category="technical",
        difficulty="hard",
        follow_up="What would you do differently if you started that project today?",
    ),
    InterviewQuestion(
        question="Describe a time when you had to deliver under a tight deadline. How did you "
                 "prioritize tasks?",
        category="behavioral",
        difficulty="medium",
        follow_up="How do you typically communicate timeline risks to stakeholders?",
    ),
    InterviewQuestion(
        question="If you joined our team and noticed the codebase had significant technical "
                 "debt, how would you approach it?",
        category="situational",
        difficulty="medium",
        follow_up="How would you balance tech debt reduction with feature delivery?",
    ),
    InterviewQuestion(
        question="What's your approach to code reviews? How do you give constructive feedback?",
        category="culture_fit",
        difficulty="easy",
        follow_up="Can you share an example where a code review led to a significantly better "
                  "solution?",
    ),
    InterviewQuestion(
        question="Explain how you would design a scalable system to handle millions of requests "
                 "per day.",
        category="technical",
        difficulty="hard",
        follow_up="How would you handle failover and ensure high availability?",
    ),
    InterviewQuestion(
        question="Tell me about a time you disagreed with a team member on a technical decision. "
                 "How was it resolved?",
        category="behavioral",
        difficulty="medium",
        follow_up="What did you learn from that experience about collaboration?",
    ),
    InterviewQuestion(
        question="A production incident occurs during off-hours. Walk me through your incident "
                 "response process.",
        category="situational",
        difficulty="hard",
        follow_up="How would you improve the system to prevent similar incidents?",
    ),
    InterviewQuestion(
        question="How do you stay current with new technologies and industry trends?",
        category="culture_fit",
        difficulty="easy",
        follow_up="Can you name a recent technology you evaluated and decided not to adopt? Why?",
    ),
    InterviewQuestion(
        question="Describe your experience with testing strategies. How do you decide what to "
                 "test and at what level?",
        category="technical",
        difficulty="medium",
        follow_up="What's your view on the testing pyramid vs. testing trophy approach?",
    ),
    InterviewQuestion(
        question="Tell me about a project where requirements changed significantly "
                 "mid-development. How did you adapt?",
        category="behavioral",
        difficulty="medium",
        follow_up="What processes would you put in place to better handle scope changes?",
    ),
    InterviewQuestion(
        question="You notice a colleague is struggling with their workload. What would you do?",
        category="culture_fit",
        difficulty="easy",
        follow_up="How do you balance helping others with your own deadlines?",
    ),
    InterviewQuestion(
        question="If you were asked to evaluate a new third-party service for our stack, what "
                 "criteria would you use?",
        category="situational",
        difficulty="medium",
        follow_up="How would you present your recommendation to the team?",
    ),
)
