OPEN_PARKING_AND_CAMERA_VIOLATIONS_ENDPOINT = 'https://data.cityofnewyork.us/resource/nc67-uf89.json'
