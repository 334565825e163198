"""
Café query pipeline.

Responsibilities:
- Validate the city / count / search query parameters, city first.
- Filter a city's cafés by case-insensitive name substring.
- Limit the result to the first ``count`` cafés.
- Render the surviving café names as a comma-joined text body.
"""
