
DISCLAIMER = ("These calculators use simplified, illustrative assumptions. Results are estimates only and are "
"not a loan offer; actual payments, eligibility and proceeds depend on program guidelines, current rates, fees "
"and a formal appraisal.")

# Tab order for the main app and the embed builder.
CALCULATORS = {"purchase":"Purchase","refinance":"Refinance","rent-vs-buy":"Rent vs Buy",
"cash-out":"Cash Out","rate-buydown":"Rate Buydown","reverse-mortgage":"Reverse Mortgage"}

# Rent vs buy runs with fixed buying assumptions; taxes and maintenance are a
# share of the current year's home value.
RENT_VS_BUY_ASSUMPTIONS = {"down_pct":0.20,"rate_pct":6.5,"term_years":30,"tax_pct":0.01,"maintenance_pct":0.01}

CASH_OUT_MAX_LTV = 0.80
CASH_OUT_TERM_YEARS = 30
BUYDOWN_TERM_YEARS = 30
BUYDOWN_TYPES = {"temporary-2-1":"Temporary 2-1 Buydown","none":"None"}

REVERSE_MIN_AGE = 62
REVERSE_MAX_AGE = 120
# (first age, last age, pct at first age, pct at last age); age is capped at
# the last age of the final band.
AVAILABILITY_BANDS = [(62, 69, 0.35, 0.40), (70, 79, 0.45, 0.50), (80, 95, 0.55, 0.60)]
