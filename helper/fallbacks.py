"""
Deterministic stand-in results used when the completion service fails or its
output cannot be trusted. Each builder depends only on the request's title and
description style fields and must validate against its capability's result
model, so callers never need to special-case a fallback.
"""

from typing import Any, Dict


def fallback_validation(idea_title: str, idea_description: str) -> Dict[str, Any]:
    return {
        "overall_score": 70,
        "category_scores": {
            "problem_clarity": 70,
            "solution_fit": 70,
            "value_proposition": 70,
            "technical_feasibility": 70,
            "business_model": 70,
            "execution_readiness": 70,
        },
        "strengths": [
            f"{idea_title} targets a concrete problem",
            "The concept can be tested with a small prototype",
            "The value proposition is easy to communicate",
        ],
        "weaknesses": [
            "The problem has not yet been validated with real users",
            "Implementation details are still open",
            "The monetization path needs more definition",
        ],
        "opportunities": [
            "Sharpen the core concept around one primary user",
            "Ship a narrow MVP to learn quickly",
            "Strengthen the value proposition with early feedback",
        ],
        "risks": [
            "Technical scope may grow beyond the initial estimate",
            "Execution may stall without a focused roadmap",
            "Willingness to pay is unproven",
        ],
        "recommendations": [
            "Interview at least ten potential users about the problem",
            "Define the smallest feature set that delivers the core value",
            "Write down pricing hypotheses and test them early",
        ],
        "next_steps": [
            "Run problem interviews with target users",
            "Build a clickable prototype or landing page",
            "Measure sign-ups or pre-orders against a clear goal",
        ],
        "validation_methods": [
            "Customer discovery interviews",
            "Prototype usability tests",
            "Landing page with a call to action",
        ],
        "feasibility_assessment": {
            "technical_complexity": "Medium",
            "resource_intensity": "Medium",
            "time_to_prototype": "1-2 months",
        },
        "improvement_suggestions": [
            "Narrow the target audience to a single well-defined segment",
            "List the riskiest assumptions and test them first",
            "Set measurable milestones for the first three months",
        ],
        "success_likelihood": "Medium",
        "innovation_level": "Incremental",
    }


def fallback_market_research(project_title: str, industry_sector: str, target_market: str) -> Dict[str, Any]:
    return {
        "market_overview": {
            "market_size_usd": 0,
            "growth_rate_percentage": 0,
            "market_maturity": "Growth",
            "key_drivers": [
                f"Demand for better solutions in {industry_sector}",
                "Digital adoption",
                "Changing customer expectations",
            ],
        },
        "industry_trends": [
            {
                "trend_name": "Digital transformation",
                "description": f"Businesses in {industry_sector} keep moving core workflows online.",
                "impact_level": "High",
                "time_horizon": "Medium-term",
                "opportunities": ["Software-first offerings", "Automation of manual processes"],
            },
            {
                "trend_name": "Personalization",
                "description": f"Customers in {target_market} expect products tailored to their needs.",
                "impact_level": "Medium",
                "time_horizon": "Short-term",
                "opportunities": ["Segment-specific features", "Data-driven recommendations"],
            },
        ],
        "competitive_landscape": {
            "competition_intensity": "Medium",
            "key_players": [],
            "market_gaps": [
                f"Focused solutions for {target_market}",
                "Simpler onboarding",
                "Transparent pricing",
            ],
        },
        "customer_analysis": {
            "primary_segments": [
                {
                    "segment_name": target_market,
                    "size_percentage": 100,
                    "characteristics": ["Primary audience of the project"],
                    "pain_points": ["Existing options do not fit their needs"],
                    "spending_power": "Medium",
                }
            ],
            "buying_behavior": "Compares a small number of options and favors proven value",
            "decision_factors": ["Price", "Ease of use", "Trust"],
        },
        "market_opportunities": [
            {
                "opportunity_title": f"{project_title} for {target_market}",
                "description": f"Serve {target_market} with a focused offering in {industry_sector}.",
                "potential_size_usd": 0,
                "difficulty_level": "Medium",
                "time_to_market": "6-12 months",
                "required_investment": "Medium",
                "success_probability": 50,
            }
        ],
        "entry_barriers": [
            {
                "barrier_type": "Customer acquisition",
                "severity": "Medium",
                "description": "Reaching the first customers takes time and budget",
                "mitigation_strategies": ["Start with a niche community", "Partner with established players"],
            }
        ],
        "regulatory_environment": {
            "regulatory_complexity": "Medium",
            "key_regulations": ["Data protection"],
            "compliance_requirements": ["Privacy policy", "Terms of service"],
            "regulatory_trends": ["Stricter data privacy rules"],
        },
        "technology_impact": {
            "disruption_level": "Medium",
            "emerging_technologies": ["Artificial intelligence", "Cloud platforms"],
            "adoption_timeline": "1-3 years",
            "impact_on_traditional_players": "Incumbents face pressure from faster software-first entrants",
        },
        "recommendations": [
            {
                "priority": "High",
                "recommendation": f"Validate demand for {project_title} with {target_market}",
                "rationale": "Market data could not be generated automatically",
                "expected_impact": "Grounded go or no-go decision",
            }
        ],
        "risk_assessment": {
            "overall_risk_level": "Medium",
            "key_risks": ["Unvalidated demand", "Competitive response", "Execution speed"],
            "mitigation_strategies": ["Run small experiments", "Track leading indicators"],
        },
    }


def fallback_pitch(idea_title: str, idea_description: str) -> Dict[str, Any]:
    return {
        "executive_summary": {
            "pitch_theme": f"Investor presentation for {idea_title}",
            "key_narrative": "A compelling startup opportunity with strong market potential",
            "target_audience": "VCs",
            "presentation_duration": "10 minutes",
            "total_slides": 10,
        },
        "slides": [
            {
                "slide_number": 1,
                "title": "Problem",
                "purpose": "Establish the pain point your startup solves",
                "content_strategy": "Start with a relatable problem that your target audience experiences",
                "key_elements": ["Problem statement", "Market pain point", "Current solutions limitations"],
                "visual_recommendations": "Use compelling statistics or customer quotes",
                "talking_points": ["Describe the problem clearly", "Show market size affected", "Explain why it matters now"],
                "duration_seconds": 60,
                "design_tips": "Use bold, impactful visuals that resonate emotionally",
            },
            {
                "slide_number": 2,
                "title": "Solution",
                "purpose": "Present your unique solution to the identified problem",
                "content_strategy": "Show how your product/service elegantly solves the problem",
                "key_elements": ["Core solution", "Key features", "Unique approach"],
                "visual_recommendations": "Product screenshots, demos, or mockups",
                "talking_points": ["Explain your solution simply", "Highlight key differentiators", "Show ease of use"],
                "duration_seconds": 90,
                "design_tips": "Make the solution feel tangible and achievable",
            },
        ],
        "storytelling_flow": {
            "hook": "Start with a compelling problem that everyone can relate to",
            "problem_narrative": "Build urgency around the pain point",
            "solution_reveal": "Present your solution as the obvious answer",
            "market_opportunity": "Show the massive potential",
            "competitive_advantage": "Explain why you'll win",
            "traction_story": "Prove early success and momentum",
            "financial_projection": "Demonstrate clear path to profitability",
            "call_to_action": "Make a specific, compelling ask",
        },
        "design_guidelines": {
            "color_scheme": "Professional blue and white with accent colors",
            "typography_recommendations": "Clean, modern fonts like Helvetica or Arial",
            "visual_style": "Modern",
            "image_suggestions": ["High-quality product shots", "Customer testimonials"],
            "chart_types": ["Bar charts", "Line graphs"],
            "branding_tips": "Keep consistent colors and fonts throughout",
        },
        "presenter_tips": {
            "opening_strategy": "Start with a compelling hook or question",
            "body_language": "Maintain confident posture and eye contact",
            "transition_techniques": ["Use connecting phrases", "Reference previous slides"],
            "handling_questions": "Listen carefully and provide concise answers",
            "closing_strategy": "End with a clear call to action",
        },
        "customization_suggestions": [
            {
                "audience_type": "Angel Investors",
                "modifications": "Focus more on team and early traction",
                "emphasis_areas": ["Team experience", "Early customers"],
            }
        ],
        "success_metrics": {
            "pitch_effectiveness_score": 70,
            "investor_readiness": "Getting Ready",
            "strengths": ["Clear problem definition", "Innovative solution", "Strong team"],
            "improvement_areas": ["Need more traction data", "Clearer financial projections", "Stronger competitive analysis"],
        },
    }


# Reply used when the growth chat cannot reach the completion service
FALLBACK_CHAT_REPLY = (
    "Sorry, I couldn't put together a proper answer just now. "
    "Could you send your question again in a moment? "
    "If it helps, tell me your current stage, your main growth channel and the metric you most want to move."
)
