# Bundled landmark catalogue for Cebu
# Used when Firestore is not configured (local dev, tests).
# Field names match the Firestore `landmarks` documents.

LANDMARKS = [
    # ── Cebu City ───────────────────────────────────────────────
    {
        "id": "magellans-cross",
        "name": "Magellan's Cross",
        "description": "Christian cross planted by Ferdinand Magellan's expedition in 1521.",
        "image": "https://images.example.com/landmarks/magellans-cross.jpg",
        "location": {"lat": 10.2936, "lng": 123.9019},
        "estimatedDuration": 30,
        "category": "Historical",
        "tourType": "cebu-city"
    },
    {
        "id": "basilica-santo-nino",
        "name": "Basilica Minore del Santo Niño",
        "description": "The oldest Roman Catholic church in the Philippines.",
        "image": "https://images.example.com/landmarks/basilica-santo-nino.jpg",
        "location": {"lat": 10.2945, "lng": 123.9021},
        "estimatedDuration": 45,
        "category": "Religious",
        "tourType": "cebu-city"
    },
    {
        "id": "fort-san-pedro",
        "name": "Fort San Pedro",
        "description": "Triangular bastion fort built by the Spanish in the 16th century.",
        "image": "https://images.example.com/landmarks/fort-san-pedro.jpg",
        "location": {"lat": 10.2925, "lng": 123.9058},
        "estimatedDuration": 60,
        "category": "Historical",
        "tourType": "cebu-city"
    },
    {
        "id": "heritage-monument",
        "name": "Heritage of Cebu Monument",
        "description": "Sculptural tableau of events and people in Cebu's history.",
        "image": "https://images.example.com/landmarks/heritage-monument.jpg",
        "location": {"lat": 10.2988, "lng": 123.8985},
        "estimatedDuration": 30,
        "category": "Cultural",
        "tourType": "cebu-city"
    },
    {
        "id": "casa-gorordo",
        "name": "Casa Gorordo Museum",
        "description": "19th-century ancestral house showing Cebuano domestic life.",
        "image": "https://images.example.com/landmarks/casa-gorordo.jpg",
        "location": {"lat": 10.2990, "lng": 123.8992},
        "estimatedDuration": 60,
        "category": "Cultural",
        "tourType": "cebu-city"
    },
    {
        "id": "taoist-temple",
        "name": "Cebu Taoist Temple",
        "description": "Hillside temple in Beverly Hills built by the Chinese community.",
        "image": "https://images.example.com/landmarks/taoist-temple.jpg",
        "location": {"lat": 10.3383, "lng": 123.8902},
        "estimatedDuration": 45,
        "category": "Religious",
        "tourType": "cebu-city"
    },
    # ── Mountain ────────────────────────────────────────────────
    {
        "id": "temple-of-leah",
        "name": "Temple of Leah",
        "description": "Roman-inspired temple overlooking the city from Busay.",
        "image": "https://images.example.com/landmarks/temple-of-leah.jpg",
        "location": {"lat": 10.3705, "lng": 123.8716},
        "estimatedDuration": 60,
        "category": "Cultural",
        "tourType": "mountain"
    },
    {
        "id": "sirao-garden",
        "name": "Sirao Flower Garden",
        "description": "Celosia flower farm nicknamed the Little Amsterdam of Cebu.",
        "image": "https://images.example.com/landmarks/sirao-garden.jpg",
        "location": {"lat": 10.4037, "lng": 123.8647},
        "estimatedDuration": 60,
        "category": "Nature",
        "tourType": "mountain"
    },
    {
        "id": "tops-lookout",
        "name": "Tops Lookout",
        "description": "Mountain-top viewing deck with a panorama of Metro Cebu.",
        "image": "https://images.example.com/landmarks/tops-lookout.jpg",
        "location": {"lat": 10.3791, "lng": 123.8667},
        "estimatedDuration": 60,
        "category": "Nature",
        "tourType": "mountain"
    },
    {
        "id": "sirao-peak",
        "name": "Sirao Peak",
        "description": "One of the highest points in Cebu City, popular for hiking.",
        "image": "https://images.example.com/landmarks/sirao-peak.jpg",
        "location": {"lat": 10.4215, "lng": 123.8583},
        "estimatedDuration": 90,
        "category": "Nature",
        "tourType": "mountain"
    },
    {
        "id": "la-vie-parisienne",
        "name": "La Vie Parisienne",
        "description": "French-themed garden, wine shop and bakery in Lahug hills.",
        "image": "https://images.example.com/landmarks/la-vie-parisienne.jpg",
        "location": {"lat": 10.3498, "lng": 123.8865},
        "estimatedDuration": 45,
        "category": "Cultural",
        "tourType": "mountain"
    }
]
