# Airports resolved without calling the AI lookup
airports = [
    {"name": "Los Angeles International Airport", "icao": "KLAX", "city": "Los Angeles", "lat": 33.9425, "lon": -118.4081},
    {"name": "Van Nuys Airport", "icao": "KVNY", "city": "Van Nuys", "lat": 34.2098, "lon": -118.4899},
    {"name": "San Francisco International Airport", "icao": "KSFO", "city": "San Francisco", "lat": 37.6189, "lon": -122.3750},
    {"name": "John F. Kennedy International Airport", "icao": "KJFK", "city": "New York", "lat": 40.6398, "lon": -73.7789},
    {"name": "London Heathrow Airport", "icao": "EGLL", "city": "London", "lat": 51.4700, "lon": -0.4543},
    {"name": "Frankfurt Airport", "icao": "EDDF", "city": "Frankfurt", "lat": 50.0379, "lon": 8.5622},
    {"name": "Munich Airport", "icao": "EDDM", "city": "Munich", "lat": 48.3538, "lon": 11.7861},
    # Add more airports here
]
