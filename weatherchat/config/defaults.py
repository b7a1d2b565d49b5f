"""Built-in city table and vocabulary used by the query parser."""

# Order matters: the first city found in a query wins, so multi-word names
# come before the single-word names they contain.
INDIAN_CITIES: list[str] = [
    "Navi Mumbai", "Mumbai", "Delhi", "Bangalore", "Bengaluru", "Chennai",
    "Kolkata", "Hyderabad", "Pune", "Ahmedabad", "Jaipur", "Lucknow",
    "Kanpur", "Nagpur", "Indore", "Thane", "Bhopal", "Visakhapatnam",
    "Pimpri", "Patna", "Vadodara", "Ghaziabad", "Ludhiana", "Agra", "Nashik",
    "Faridabad", "Meerut", "Rajkot", "Kalyan", "Vasai", "Varanasi",
    "Srinagar", "Aurangabad", "Solapur", "Vijayawada", "Kolhapur",
    "Amritsar", "Sangli", "Malegaon", "Ulhasnagar", "Jalgaon", "Akola",
    "Latur", "Ahmadnagar", "Dhule", "Ichalkaranji", "Parbhani", "Bhusawal",
    "Panvel", "Satara", "Beed", "Yavatmal", "Kamptee", "Gondia", "Barshi",
    "Achalpur", "Osmanabad", "Nanded", "Wardha", "Udgir", "Amalner", "Akot",
    "Pandharpur", "Shrirampur", "Parli", "Pachora", "Jalna", "Bhadravati",
]

WORLD_CITIES: list[str] = [
    "Tokyo", "New York", "London", "Paris", "Sydney", "Dubai", "Singapore",
    "Hong Kong", "Beijing", "Shanghai", "Los Angeles", "Chicago", "Toronto",
    "Vancouver", "Berlin", "Madrid", "Rome", "Amsterdam", "Vienna", "Zurich",
    "Stockholm", "Oslo", "Copenhagen", "Helsinki", "Warsaw", "Prague",
    "Budapest", "Bucharest", "Sofia", "Zagreb", "Ljubljana", "Bratislava",
    "Vilnius", "Riga", "Tallinn", "Dublin", "Edinburgh", "Glasgow",
    "Manchester", "Birmingham", "Liverpool", "Leeds", "Sheffield", "Bristol",
    "Newcastle", "Nottingham", "Leicester", "Coventry", "Bradford", "Cardiff",
    "Belfast", "Derby", "Plymouth", "Wolverhampton", "Southampton",
    "Swansea", "Salford", "Aberdeen", "Westminster", "Portsmouth", "York",
    "Peterborough", "Dundee", "Sunderland", "Norwich", "Preston", "Stoke",
    "Newport News", "Newport", "Swindon", "Southend", "Middlesbrough",
    "Huddersfield", "Oxford", "Ipswich", "Blackpool", "Bolton",
    "Bournemouth", "Brighton", "Stockport", "West Bromwich", "Reading",
    "Oldham", "Aldershot", "Walsall", "Maidstone", "Bexley", "Sutton",
    "Blackburn", "Colchester", "Chester", "Cheltenham", "Burnley",
    "Grimsby", "Shrewsbury", "Lowestoft", "Hartlepool", "Hastings",
    "Harlow", "Torquay", "Basingstoke", "Exeter", "Eastbourne", "Guildford",
    "Gloucester", "Mansfield", "Watford", "Runcorn", "Scunthorpe", "Woking",
]

US_CITIES: list[str] = [
    "Houston", "Phoenix", "Philadelphia", "San Antonio", "San Diego",
    "Dallas", "San Jose", "Austin", "Jacksonville", "Fort Worth", "Columbus",
    "Charlotte", "San Francisco", "Indianapolis", "Seattle", "Denver",
    "Washington", "Boston", "El Paso", "Nashville", "Detroit",
    "Oklahoma City", "Portland", "North Las Vegas", "Las Vegas", "Memphis",
    "Louisville", "Baltimore", "Milwaukee", "Albuquerque", "Tucson",
    "Fresno", "Sacramento", "Mesa", "Kansas City", "Atlanta", "Long Beach",
    "Colorado Springs", "Raleigh", "Miami", "Virginia Beach", "Omaha",
    "Oakland", "Minneapolis", "Tulsa", "Arlington", "Tampa", "New Orleans",
    "Wichita", "Cleveland", "Bakersfield", "Aurora", "Anaheim", "Honolulu",
    "Santa Ana", "Corpus Christi", "Riverside", "Lexington", "Stockton",
    "St. Paul", "Newark", "Buffalo", "Plano", "Cincinnati", "St. Petersburg",
    "Toledo", "Greensboro", "Henderson", "Lincoln", "Jersey City",
    "Chula Vista", "Fort Wayne", "Orlando", "Chandler", "Laredo", "Norfolk",
    "Durham", "Madison", "Lubbock", "Irvine", "Winston-Salem", "Glendale",
    "Garland", "Hialeah", "Reno", "Chesapeake", "Gilbert", "Baton Rouge",
    "Irving", "Scottsdale", "Fremont", "Boise", "Richmond",
    "San Bernardino", "Spokane", "Rochester", "Des Moines", "Modesto",
    "Fayetteville", "Tacoma", "Oxnard", "Fontana", "Montgomery",
    "Moreno Valley", "Shreveport", "Yonkers", "Akron", "Huntington Beach",
    "Little Rock", "Augusta", "Amarillo", "Mobile", "Grand Rapids",
    "Salt Lake City", "Huntsville", "Grand Prairie", "Knoxville",
    "Worcester", "Brownsville", "Overland Park", "Santa Clarita",
    "Providence", "Garden Grove", "Chattanooga", "Oceanside", "Jackson",
    "Fort Lauderdale", "Santa Rosa", "Rancho Cucamonga", "Port St. Lucie",
    "Tempe", "Ontario", "Sioux Falls", "Springfield", "Peoria",
    "Pembroke Pines", "Elk Grove", "Salem", "Lancaster", "Corona", "Eugene",
    "Palmdale", "Salinas", "Pasadena", "Rockford", "Pomona", "Joliet",
    "Paterson", "Torrance", "Syracuse", "Bridgeport", "Hayward",
    "Fort Collins", "Escondido", "Sunnyvale", "Lakewood", "Hollywood",
    "Naperville", "Dayton", "Cary", "Hampton", "Alexandria", "Hartford",
    "Vallejo", "Boulder", "New Haven", "Waco", "Topeka", "Thousand Oaks",
    "El Monte", "McKinney", "Concord", "Visalia", "Simi Valley", "Lafayette",
    "Lansing", "Beaumont", "Odessa", "Downey", "West Covina", "Costa Mesa",
    "Round Rock", "Carlsbad", "Fairfield", "Evansville", "Murfreesboro",
    "Burbank", "Antioch", "Temecula", "Abilene", "Athens", "Clarksville",
    "Allentown", "Midland", "Norman", "Berkeley", "Arvada", "Palm Bay",
    "Provo", "Elgin", "Lakeland", "Pompano Beach", "West Palm Beach",
    "Renton", "Centennial",
]

KNOWN_CITIES: list[str] = INDIAN_CITIES + WORLD_CITIES + US_CITIES

# Words that signal a question is about the weather
WEATHER_KEYWORDS: list[str] = [
    "weather", "temperature", "rain", "sunny", "cloudy", "forecast",
    "climate", "humidity", "wind",
]

# Never a place name, whatever the capitalization
COMMON_WORDS: frozenset[str] = frozenset(
    WEATHER_KEYWORDS
    + [
        "like", "today", "tomorrow", "now", "what", "whats", "how", "tell",
        "show", "me", "the", "is", "in", "at", "for", "of", "and", "or",
        "but", "so", "yet", "nor", "please", "will", "it", "be", "there",
        "going", "does", "do", "can", "you", "hello", "hi", "thanks",
    ]
)

# Intents recognised by the probability lookup, in priority order
PROBABILITY_WEATHER_TYPES: list[str] = [
    "rain", "sunny", "cloudy", "snow", "storm", "wind", "temperature",
    "humidity",
]

# Intent -> key in the probability backend's response
PROBABILITY_EVENT_KEYS: dict[str, str] = {
    "rain": "rain",
    "temperature": "extreme_heat",
    "wind": "high_wind",
    "cloudy": "cloudy",
    "sunny": "good_weather",
}
