from typing import List

HEALTHY: List[str] = ['Carrots', 'Tofu', 'Lettuce', 'Cucumbers']
JUNK: List[str] = ['Cucumbers', 'Cheeseburgers', 'Tofu', 'Pizza', 'Bacon']
