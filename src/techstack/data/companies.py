"""Bundled sample companies used to seed the store."""

SEED_COMPANIES: list[dict] = [
    {
        "id": 1,
        "name": "Innovate Inc.",
        "domain": "innovate.com",
        "industry": "Technology",
        "category": "B2B SaaS",
        "hq_country": "USA",
        "founded": 2012,
        "revenue": 120_000_000,
        "employees": 1500,
        "technologies": ["React", "Node.js", "AWS", "PostgreSQL", "Stripe"],
        "office_locations": ["San Francisco", "New York", "London"],
    },
    {
        "id": 2,
        "name": "HealthWell",
        "domain": "healthwell.io",
        "industry": "Healthcare",
        "category": "HealthTech",
        "hq_country": "Canada",
        "founded": 2015,
        "revenue": 75_000_000,
        "employees": 800,
        "technologies": ["Angular", "Python", "Google Cloud", "MySQL", "Shopify"],
        "office_locations": ["Toronto", "Vancouver"],
    },
    {
        "id": 3,
        "name": "FinSecure",
        "domain": "finsecure.co",
        "industry": "Finance",
        "category": "FinTech",
        "hq_country": "UK",
        "founded": 2008,
        "revenue": 250_000_000,
        "employees": 3000,
        "technologies": ["Java", ".NET", "Azure", "SQL Server", "Intercom"],
        "office_locations": ["London", "Manchester", "Edinburgh"],
    },
    {
        "id": 4,
        "name": "E-Shop World",
        "domain": "eshopworld.net",
        "industry": "E-commerce",
        "category": "Marketplace",
        "hq_country": "Ireland",
        "founded": 2014,
        "revenue": 55_000_000,
        "employees": 600,
        "technologies": ["Shopify", "React", "GraphQL", "Stripe", "Zendesk"],
        "office_locations": ["Dublin", "Berlin"],
    },
    {
        "id": 5,
        "name": "TravelGo",
        "domain": "travelgo.com",
        "industry": "Travel",
        "category": "Consumer",
        "hq_country": "Australia",
        "founded": 2016,
        "revenue": 30_000_000,
        "employees": 350,
        "technologies": ["Vue.js", "PHP", "AWS", "MongoDB"],
        "office_locations": ["Sydney", "Melbourne"],
    },
    {
        "id": 6,
        "name": "AdOptimize",
        "domain": "adoptimize.ai",
        "industry": "Advertising",
        "category": "AdTech",
        "hq_country": "USA",
        "founded": 2018,
        "revenue": 90_000_000,
        "employees": 1100,
        "technologies": ["Python", "TensorFlow", "Google Cloud", "BigQuery", "React"],
        "office_locations": ["Austin", "Chicago"],
    },
    {
        "id": 7,
        "name": "GreenEnergy Solutions",
        "domain": "greenenergy.sol",
        "industry": "Energy",
        "category": "CleanTech",
        "hq_country": "Germany",
        "founded": 2010,
        "revenue": 150_000_000,
        "employees": 2200,
        "technologies": ["Python", "Java", "Azure", "IoT", "SQL Server"],
        "office_locations": ["Berlin", "Munich", "Hamburg"],
    },
    {
        "id": 8,
        "name": "RealEstate Finder",
        "domain": "realestatefinder.com",
        "industry": "Real Estate",
        "category": "PropTech",
        "hq_country": "USA",
        "founded": 2017,
        "revenue": 42_000_000,
        "employees": 550,
        "technologies": ["React", "Firebase", "Google Maps API", "Node.js"],
        "office_locations": ["Miami", "Los Angeles"],
    },
    {
        "id": 9,
        "name": "CyberGuard",
        "domain": "cyberguard.tech",
        "industry": "Cybersecurity",
        "category": "B2B SaaS",
        "hq_country": "Israel",
        "founded": 2013,
        "revenue": 88_000_000,
        "employees": 900,
        "technologies": ["Python", "Go", "AWS", "Kubernetes", "Elasticsearch"],
        "office_locations": ["Tel Aviv"],
    },
    {
        "id": 10,
        "name": "Gamer's Hub",
        "domain": "gamershub.io",
        "industry": "Gaming",
        "category": "Consumer",
        "hq_country": "Japan",
        "founded": 2005,
        "revenue": 300_000_000,
        "employees": 4000,
        "technologies": ["C++", "Unreal Engine", "Unity", "AWS", "Node.js", "Stripe"],
        "office_locations": ["Tokyo", "Kyoto", "Seattle"],
    },
    {
        "id": 11,
        "name": "UK Travel Co",
        "domain": "uktravel.co.uk",
        "industry": "Travel",
        "category": "Consumer",
        "hq_country": "UK",
        "founded": 2011,
        "revenue": 22_000_000,
        "employees": 250,
        "technologies": ["Wordpress", "PHP", "MySQL", "jQuery"],
        "office_locations": ["London"],
    },
    {
        "id": 12,
        "name": "Aussie Adverts",
        "domain": "aussieads.com.au",
        "industry": "Advertising",
        "category": "AdTech",
        "hq_country": "Australia",
        "founded": 2019,
        "revenue": 15_000_000,
        "employees": 150,
        "technologies": ["Google Analytics", "Facebook Ads", "Wordpress"],
        "office_locations": ["Perth"],
    },
]
