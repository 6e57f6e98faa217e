"""
Domain Constants

Centrally manages the method names, formula constants, input defaults and
badge definitions shared across the valuation engine.
"""

# Method names in canonical report order
METHODS = ["DLA", "PVC", "SCOPE", "EAVP", "PRICE", "VECTOR"]

# Batch modes
BATCH_MODES = {
    "CORE": ["DLA", "PVC", "SCOPE"],
    "ALL": METHODS,
}

# Methods that need a qualitative judgment from the scorer
JUDGED_METHODS = {"PVC", "SCOPE"}

CHARS_PER_WORD = 5
CHARS_PER_TOKEN = 4

DLA_DEFAULTS = {
    "output_char_count": 5000,
    "api_latency_seconds": 10,
    "edit_session_seconds": 120,
    "api_cost_usd": 0.01,
    "human_wpm": 40,
    "human_reading_wpm": 250,
    "hourly_wage": 60,
}

EAVP_CONFIG = {"regeneration_penalty_minutes": 2.0}
EAVP_DEFAULTS = {
    "output_chars": 4000,
    "user_wpm": 50,
    "edit_time_minutes": 5,
    "regenerations": 1,
    "market_rate": 100,
}

PRICE_CONFIG = {"freelance_fee_percentage": 0.15, "marketplace_fee_percentage": 0.02}
PRICE_DEFAULTS = {
    "human_time_minutes": 60,
    "human_hourly_rate": 80,
    "review_time_minutes": 5,
    "token_cost": 0.05,
    "reliability": 0.9,
    "yearly_volume": 250,
    "use_case": "Ad-hoc",
    "valued_parameter": "Core Logic",
    "parameter_weight": 1.0,
}

# Yearly run benchmark per PRICE use case
PRICE_USE_CASES = {
    "Ad-hoc": {"benchmark": 1, "description": "One-off creative/analytical tasks."},
    "SOP": {"benchmark": 200, "description": "Standard Operating Procedure used weekly."},
    "Pipeline": {"benchmark": 5000, "description": "Automated API-driven workflow."},
}

INDUSTRY_VOLUME_MULTIPLIERS = {
    "Marketing & Copywriting": 1.5,
    "Legal & Compliance": 0.8,
    "Software Development": 2.0,
    "Healthcare & Biotech": 0.9,
    "Finance & Banking": 1.2,
    "Education & EdTech": 1.1,
    "Customer Support": 5.0,
    "Business Strategy": 0.7,
    "Other": 1.0,
}

VECTOR_CONFIG = {
    "correction_time_multiplier": 0.6,
    "freelance_price_percentage": 0.15,
    "marketplace_price_percentage": 0.01,
    "max_score": 5,
}
VECTOR_DEFAULTS = {
    "score_constraints": 4,
    "score_context": 3,
    "score_feasibility": 4,
    "score_safety": 0,
    "vector_hourly_rate": 100,
    "time_saved_minutes": 45,
    "annual_volume": 200,
    "api_cost_per_run": 0.5,
}

PVC_CONFIG = {
    "max_raw_score": 4,
    "weights": {"G": 0.35, "C": 0.15, "S": 0.20, "D": 0.15, "F": 0.15},
    "penalties": {"A": 0.8, "R": 1.0, "L": 0.3},
    "ambiguity_exponent": 1.2,
    "length": {"T_min": 40, "T_opt": 250, "T_max": 2000},
}
PVC_SCORE_FIELDS = ["G_r", "C_r", "S_r", "D_r", "F_r", "A_r", "R_r"]

SCOPE_CONFIG = {
    "weights": {"S": 1.0, "H": 2.0, "D": 1.0},
    # (lower bound, label), checked top-down with a strict ">" comparison
    "tiers": [(2.0, "High-Value Asset"), (0.5, "Market Standard")],
    "floor_tier": "Scrap Value",
}
SCOPE_SCORE_FIELDS = ["S", "H", "D", "E", "Teff"]

BADGE_TIERS = ["Gold", "Silver", "Bronze"]

# Badge catalog in declaration order
BADGE_DEFINITIONS = [
    # Gold
    {"id": "NEURAL_ALCHEMIST", "name": "Neural Alchemist", "tier": "Gold", "icon": "Sparkles",
     "description": "PVC Score >= 98. Absolute mastery of neural logic and instruction transmutation."},
    {"id": "BULLETPROOF_LOGIC", "name": "Bulletproof Logic", "tier": "Gold", "icon": "ShieldAlert",
     "description": "VECTOR Q-Score > 0.95. Verified for high-stakes mission-critical production."},
    {"id": "ROI_TITAN", "name": "ROI Titan", "tier": "Gold", "icon": "TrendingUp",
     "description": "DLA Net Profit > $50/run. Significant economic displacement verified."},
    {"id": "SEMANTIC_LEGEND", "name": "Semantic Legend", "tier": "Gold", "icon": "Crown",
     "description": "SCOPE PVI > 2.5. Extreme information density and architectural perfection."},
    # Silver
    {"id": "PRECISION_ENGINEER", "name": "Precision Engineer", "tier": "Silver", "icon": "Target",
     "description": "PVC Goal Clarity = 4. Zero ambiguity in objective definition."},
    {"id": "SIGNAL_MAESTRO", "name": "Signal Maestro", "tier": "Silver", "icon": "Radio",
     "description": "SCOPE Token Efficiency > 0.9. Extreme semantic density with near-zero filler."},
    {"id": "MARKET_DISRUPTOR", "name": "Market Disruptor", "tier": "Silver", "icon": "Zap",
     "description": "PRICE TAV > $50,000. High-value IP asset for enterprise workflows."},
    {"id": "STRUCTURED_PRO", "name": "Structured Pro", "tier": "Silver", "icon": "Layers",
     "description": "PVC Structure Score = 4. Perfect use of semantic delimiters."},
    # Bronze
    {"id": "SAFE_HARBOR", "name": "Safe Harbor", "tier": "Bronze", "icon": "ShieldCheck",
     "description": "Risk Score = 0. Asset is clean, compliant, and verified safe."},
    {"id": "FEASIBILITY_VERIFIED", "name": "Feasibility Verified", "tier": "Bronze", "icon": "CheckCircle",
     "description": "Feasibility Score = 4. Perfectly aligned with LLM capabilities."},
    {"id": "EFFICIENCY_BOOST", "name": "Efficiency Boost", "tier": "Bronze", "icon": "Zap",
     "description": "EAVP Efficiency > 50%. Massive verified time-savings."},
    {"id": "CLEAN_SIGNAL", "name": "Clean Signal", "tier": "Bronze", "icon": "Activity",
     "description": "SCOPE Entropy < 0.1. Extremely low risk of interpretative drift."},
]

# Default scorer model
DEFAULT_JUDGE_MODEL = "gemini-2.5-flash"

# OpenAI-compatible providers: model prefix -> (base URL, API key env var)
OPENAI_COMPATIBLE_PROVIDERS = {
    "lmstudio": ("http://localhost:1234/v1", "LMSTUDIO_API_KEY"),
    "groq": ("https://api.groq.com/openai/v1", "GROQ_API_KEY"),
    "cerebras": ("https://api.cerebras.ai/v1", "CEREBRAS_API_KEY"),
    "sambanova": ("https://api.sambanova.ai/v1", "SAMBANOVA_API_KEY"),
    "openrouter": ("https://openrouter.ai/api/v1", "OPENROUTER_API_KEY"),
    "huggingface": ("https://router.huggingface.co/v1", "HF_TOKEN"),
}
