"""
Recommendation engine: turns a learner-attribute profile into a diversified
activity set, evaluations of current activities and parent home actions.

Modules
-------
feasibility    : compute_feasibility() + budget_match() + climate_match()
                 are pure functions over one candidate and a context.
scorer         : ScoredActivity dataclass + compute_relevance()
                 + score_candidates(): pure functions, no I/O.
selector       : SelectionState + named SelectionPass list + select_diverse()
                 + build_recommendation_set().
evaluator      : evaluate_activity() + evaluate_current_activities().
parent_actions : generate_parent_actions().
reporter       : write_recommendation_json() + write_recommendation_csv().
"""
