"""
F1 constructor wins history.

Fetches race results from the Ergast-compatible Jolpica API, scrapes current
team points from formula1.com, and renders:
  - cumulative wins per constructor   → cumulative_wins.png
  - wins per season                   → season_wins.png
  - race x season winner heatmap      → results_heatmap.png
  - current team points               → team_points.png
"""
