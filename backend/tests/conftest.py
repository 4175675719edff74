"""Shared test configuration and fixtures."""

import pytest

from api.router import limiter

# Rate limits are per-client and would trip across a full test run.
limiter.enabled = False


SAMPLE_RESUME = """Jane Doe
jane.doe@email.com | 555-123-4567

Professional Summary
Senior software engineer with 7 years of experience building web platforms.

Experience
Senior Software Engineer, Acme Corp
Jan 2020 - Present
- Developed React and TypeScript frontends for 2M users
- Led migration of REST APIs to GraphQL, improved latency by 35%
- Deployed services on AWS with Docker and Kubernetes
- Implemented CI/CD pipelines with Jenkins

Software Engineer, Globex
Jun 2016 - Dec 2019
- Designed PostgreSQL schemas and SQL reporting for 3 years
- Mentored 4 junior developers on testing with Jest

Education
B.S. Computer Science, State University

Skills
Python, JavaScript, React, Node.js, Docker, Kubernetes, AWS, Git, Agile, Scrum
Communication, Leadership, Problem Solving
"""

SAMPLE_JD = """Senior Full-Stack Engineer

We are looking for a senior engineer to lead our ecommerce platform team.

Requirements:
- 5+ years of experience with JavaScript, TypeScript and React
- Node.js and REST API development
- AWS cloud deployment with Docker and Kubernetes
- SQL and MongoDB database design
- Strong communication and leadership skills
"""


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD
