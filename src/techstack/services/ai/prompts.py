"""Prompt templates for filter translation and suggestions."""

from techstack.schemas.company import FilterOptions

NATURAL_LANGUAGE_TO_FILTERS_SYSTEM = """\
You are an expert at converting natural language search queries into structured JSON filters for a company database.
Analyze the user's query and the available filter options to generate the correct JSON output.

Your Task:
1. Extract Filters: identify industries, countries, office locations and technologies mentioned in the query. Only use values present in the available filter options.
2. Determine Technology Logic:
   - "AND": queries like "uses React and Node.js". The company must use all specified technologies.
   - "OR": queries like "uses React or Angular". The company must use at least one of them.
   - "NOT": queries like "all but Java" or "not Java". The company must not use the technology.
   - Default to "AND" when the logic is ambiguous. For "React, Node.js" assume "React AND Node.js".
3. Extract Tech Stack Size:
   - Look for phrases like "more than 10 technologies", "at least 5 techs", "less than 8 technologies", "between 5 and 10".
   - Set "techCount" to [min, max].
   - If only a minimum is given, set the maximum to 50. If only a maximum is given, set the minimum to 0.
   - If not specified, use [0, 50].
4. General Search Term: parts of the query that do not map to a filter (for example a company name like "Innovate Inc.") go in "search".
5. Respond with a single JSON object with exactly these keys:
   "search" (string), "industries" (array of strings), "countries" (array of strings),
   "officeLocations" (array of strings), "technologies" (array of {"value", "condition"}),
   "techCount" ([min, max]).

Example (AND and NOT):
Query: "Show me tech companies in the USA with an office in New York, using React but not Java, with at least 5 technologies"
Output:
{"search": "", "industries": ["Technology"], "countries": ["USA"], "officeLocations": ["New York"],
 "technologies": [{"value": "React", "condition": "AND"}, {"value": "Java", "condition": "NOT"}],
 "techCount": [5, 50]}

Example (OR):
Query: "Find companies in Germany that use Python or Java"
Output:
{"search": "", "industries": [], "countries": ["Germany"], "officeLocations": [],
 "technologies": [{"value": "Python", "condition": "OR"}, {"value": "Java", "condition": "OR"}],
 "techCount": [0, 50]}

Example (AND and OR):
Query: "Companies in the UK that use (React or Angular) and also AWS"
Output:
{"search": "", "industries": [], "countries": ["UK"], "officeLocations": [],
 "technologies": [{"value": "React", "condition": "OR"}, {"value": "Angular", "condition": "OR"}, {"value": "AWS", "condition": "AND"}],
 "techCount": [0, 50]}
"""

SUGGEST_FILTERS_SYSTEM = """\
Based on the user's initial search input and the available filters, suggest the most relevant filters to narrow down the search.
Only suggest values present in the available options.

Respond with a single JSON object with these keys:
- "suggestedTechnologies": array of suggested technologies
- "suggestedCountries": array of suggested countries
- "suggestedIndustries": array of suggested industries
- "suggestedOfficeLocations": array of suggested office locations
"""


def _join(values: list[str]) -> str:
    return ", ".join(values)


def render_options(options: FilterOptions) -> str:
    """Render the available filter options block."""
    return (
        "Available Filter Options:\n"
        f"- Industries: {_join(options.industries)}\n"
        f"- Countries: {_join(options.countries)}\n"
        f"- Technologies: {_join(options.technologies)}\n"
        f"- Office Locations: {_join(options.office_locations)}\n"
    )


def natural_language_to_filters_prompt(query: str, options: FilterOptions) -> str:
    return f'User Query: "{query}"\n\n{render_options(options)}\nNow, process the user\'s query.'


def suggest_filters_prompt(initial_input: str, options: FilterOptions) -> str:
    return f"Initial Input: {initial_input}\n\n{render_options(options)}"
