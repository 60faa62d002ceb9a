"""Default reference data.

Seeded into the database on startup and served directly by the local store,
which has no reference tables of its own.
"""

# (group name, group emoji, [(category name, emoji), ...])
CATEGORY_GROUPS = [
    ("Food & Beverages", "🍽️", [
        ("Milk", "🥛"), ("Tea", "🍵"), ("Coffee", "☕"), ("Breakfast", "🍳"),
        ("Lunch", "🍛"), ("Dinner", "🍽️"), ("Snacks", "🍿"), ("Street Food", "🌮"),
        ("Dosa / Idli / Parotta", "🫓"), ("Egg", "🥚"), ("Chicken / Fish", "🍗"),
        ("Protein Foods", "💪"), ("Fruits", "🍎"), ("Vegetables", "🥕"),
        ("Sweets / Desserts", "🍰"), ("Juice / Soft Drinks", "🧃"),
    ]),
    ("Household & Utilities", "🏠", [
        ("Grocery", "🛒"), ("Cooking Gas", "🔥"), ("Electricity Bill", "⚡"),
        ("Water Bill", "💧"), ("House Rent", "🏠"), ("Maintenance", "🔧"),
        ("Cleaning Supplies", "🧹"),
    ]),
    ("Travel & Transport", "🚍", [
        ("Bus Fare", "🚌"), ("Train Fare", "🚆"), ("Auto / Taxi", "🛺"),
        ("Bike Fuel", "🏍️"), ("Car Fuel", "⛽"), ("Parking", "🅿️"), ("Toll", "🛣️"),
        ("Vehicle Service", "🔩"),
    ]),
    ("Communication & Digital", "📱", [
        ("Mobile Recharge", "📱"), ("Internet / WiFi", "📶"), ("OTT Subscriptions", "📺"),
        ("App Subscriptions", "📲"), ("Cloud Storage", "☁️"),
    ]),
    ("Health & Fitness", "🏥", [
        ("Medicine", "💊"), ("Doctor Visit", "👨‍⚕️"), ("Health Checkup", "🩺"),
        ("Gym Fees", "🏋️"), ("Protein Supplements", "🥤"), ("Fitness Equipment", "🏃"),
        ("Sports Activity", "⚽"),
    ]),
    ("Personal & Lifestyle", "👕", [
        ("Clothing", "👕"), ("Footwear", "👟"), ("Haircut / Salon", "💇"),
        ("Grooming Products", "🧴"), ("Cosmetics", "💄"), ("Accessories", "👜"),
    ]),
    ("Entertainment & Social", "🎉", [
        ("Movies", "🎬"), ("Outing", "🎡"), ("Party", "🎉"), ("Events", "🎪"),
        ("Games", "🎮"), ("Streaming Rentals", "🎥"),
    ]),
    ("Shopping & Online", "🛍️", [
        ("Online Shopping", "🛍️"), ("Electronics", "📷"), ("Gadgets", "🔌"),
        ("Home Appliances", "🏠"), ("Stationery", "✏️"),
    ]),
    ("Education & Learning", "🎓", [
        ("Course Fees", "🎓"), ("Online Courses", "💻"), ("Books", "📚"),
        ("Exam Fees", "📝"), ("Certifications", "📜"),
    ]),
    ("Work & Business", "💼", [
        ("Office Travel", "💼"), ("Work Tools", "🛠️"), ("Software", "💿"),
        ("Domain / Hosting", "🌐"), ("Printing", "🖨️"),
    ]),
    ("Financial", "💰", [
        ("EMI", "💳"), ("Loan Repayment", "🏦"), ("Credit Card Payment", "💳"),
        ("Savings", "🐷"), ("Investment", "📈"),
    ]),
    ("Miscellaneous", "📦", [
        ("Gifts", "🎁"), ("Charity / Donation", "❤️"), ("Emergency", "🚨"), ("Other", "📦"),
    ]),
]

# (name, protein per unit, unit, default quantity, emoji)
# Mass/volume units carry protein per 100 g or ml, countable units per piece/scoop.
PROTEIN_FOODS = [
    ("Soy Chunks", 52, "g", 50, "🫘"),
    ("Chicken Breast", 31, "g", 100, "🍗"),
    ("Whey Protein", 25, "scoop", 1, "💪"),
    ("Peanuts", 26, "g", 50, "🥜"),
    ("Peanut Butter", 25, "g", 30, "🥜"),
    ("Cheese", 22, "g", 50, "🧀"),
    ("Fish (Tuna/Salmon)", 22, "g", 100, "🐟"),
    ("Almonds", 21, "g", 30, "🌰"),
    ("Pumpkin Seeds", 19, "g", 30, "🎃"),
    ("Chickpeas (Chana)", 19, "g", 100, "🫘"),
    ("Paneer", 18, "g", 100, "🧈"),
    ("Flax Seeds", 18, "g", 20, "🌱"),
    ("Chia Seeds", 17, "g", 20, "🌱"),
    ("Egg Whites", 11, "g", 100, "🥚"),
    ("Greek Yogurt", 10, "g", 150, "🥣"),
    ("Tofu", 9, "g", 100, "🧊"),
    ("Lentils (Dal)", 9, "g", 100, "🍲"),
    ("Rajma (Kidney Beans)", 8, "g", 100, "🫘"),
    ("Eggs (Whole)", 6, "piece", 1, "🥚"),
    ("Curd (Yogurt)", 3.5, "g", 150, "🥣"),
    ("Milk", 3.4, "ml", 250, "🥛"),
]

COUNTABLE_UNITS = {"piece", "scoop"}


def default_categories():
    rows = []
    for group_name, _group_emoji, items in CATEGORY_GROUPS:
        for name, emoji in items:
            rows.append({"name": name, "emoji": emoji, "group_name": group_name})
    return rows


def default_protein_foods():
    return [
        {
            "name": name,
            "protein_per_unit": per_unit,
            "unit": unit,
            "default_quantity": quantity,
            "emoji": emoji,
            "sort_order": position,
        }
        for position, (name, per_unit, unit, quantity, emoji) in enumerate(PROTEIN_FOODS, start=1)
    ]


def protein_for(protein_per_unit: float, unit: str, quantity: float) -> float:
    """Grams of protein in `quantity` of a food."""
    if unit in COUNTABLE_UNITS:
        return protein_per_unit * quantity
    return protein_per_unit * quantity / 100
