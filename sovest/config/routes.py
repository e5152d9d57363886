"""
SoVest Application Routes

Route definition formats:

1. Simple route:
    {'path': '/about', 'controller': 'PageController', 'action': 'about', 'name': 'pages.about'}

2. Route with method constraints and middleware:
    {
        'path': '/predictions/edit/{id}',
        'controller': 'PredictionController',
        'action': 'edit',
        'method': 'GET',
        'middleware': ['prediction.owner'],
        'name': 'predictions.edit',
    }

3. Route groups:
    {
        'type': 'group',
        'name': 'admin',               # Group name, recorded on every route inside
        'prefix': '/admin',            # URL prefix for all routes in the group
        'middleware': ['auth'],        # Middleware applied to all routes in the group
        'namespace': 'Admin',          # Controller namespace prefix
        'routes': [...],
    }

Numeric paths ('404', '500') map error pages to controllers and are not named routes.
"""

ROUTES = [
    # Authentication routes
    {
        'type': 'group',
        'name': 'auth',
        'routes': [
            {'path': '/', 'controller': 'HomeController', 'action': 'index', 'method': 'GET', 'name': 'home'},
            {'path': '/login', 'controller': 'AuthController', 'action': 'loginForm', 'method': 'GET', 'name': 'login.form'},
            {'path': '/login/submit', 'controller': 'AuthController', 'action': 'login', 'method': 'POST', 'name': 'login.submit'},
            {'path': '/register', 'controller': 'AuthController', 'action': 'registerForm', 'method': 'GET', 'name': 'register.form'},
            {'path': '/register/submit', 'controller': 'AuthController', 'action': 'register', 'method': 'POST', 'name': 'register.submit'},
            {'path': '/logout', 'controller': 'AuthController', 'action': 'logout', 'method': 'GET', 'name': 'logout', 'middleware': ['auth']},
        ],
    },

    # User routes
    {
        'type': 'group',
        'name': 'user',
        'middleware': ['auth'],
        'routes': [
            {'path': '/home', 'controller': 'HomeController', 'action': 'home', 'method': 'GET', 'name': 'user.home'},
            {'path': '/account', 'controller': 'UserController', 'action': 'account', 'method': 'GET', 'name': 'user.account'},
            {'path': '/leaderboard', 'controller': 'UserController', 'action': 'leaderboard', 'method': 'GET', 'name': 'user.leaderboard'},
        ],
    },

    # Prediction routes
    {
        'type': 'group',
        'name': 'predictions',
        'prefix': '/predictions',
        'routes': [
            {'path': '/', 'controller': 'PredictionController', 'action': 'index', 'method': 'GET', 'name': 'predictions.index'},
            {'path': '/view/{id}', 'controller': 'PredictionController', 'action': 'view', 'method': 'GET', 'name': 'predictions.view'},
            {'path': '/trending', 'controller': 'PredictionController', 'action': 'trending', 'method': 'GET', 'name': 'predictions.trending'},
            {
                'type': 'group',
                'middleware': ['auth'],
                'routes': [
                    {'path': '/create', 'controller': 'PredictionController', 'action': 'create', 'method': 'GET', 'name': 'predictions.create'},
                    {'path': '/store', 'controller': 'PredictionController', 'action': 'store', 'method': 'POST', 'name': 'predictions.store'},
                    {'path': '/edit/{id}', 'controller': 'PredictionController', 'action': 'edit', 'method': 'GET',
                     'name': 'predictions.edit', 'middleware': ['prediction.owner']},
                    {'path': '/update/{id}', 'controller': 'PredictionController', 'action': 'update', 'method': 'POST',
                     'name': 'predictions.update', 'middleware': ['prediction.owner']},
                    {'path': '/delete/{id}', 'controller': 'PredictionController', 'action': 'delete', 'method': 'POST',
                     'name': 'predictions.delete', 'middleware': ['prediction.owner']},
                    {'path': '/vote/{id}', 'controller': 'PredictionController', 'action': 'vote', 'method': 'POST', 'name': 'predictions.vote'},
                ],
            },
        ],
    },

    # Page routes
    {
        'type': 'group',
        'name': 'pages',
        'routes': [
            {'path': '/about', 'controller': 'PageController', 'action': 'about', 'method': 'GET', 'name': 'pages.about'},
            {'path': '/search', 'controller': 'SearchController', 'action': 'index', 'method': 'GET', 'name': 'search'},
        ],
    },

    # API routes
    {
        'type': 'group',
        'name': 'api',
        'prefix': '/api',
        'middleware': ['api'],
        'routes': [
            {'path': '/predictions', 'controller': 'PredictionController', 'action': 'apiHandler', 'method': 'GET|POST', 'name': 'api.predictions'},
            {'path': '/predictions/create', 'controller': 'PredictionController', 'action': 'store', 'method': 'POST', 'name': 'api.predictions.create'},
            {'path': '/predictions/update', 'controller': 'PredictionController', 'action': 'update', 'method': 'POST', 'name': 'api.predictions.update'},
            {'path': '/predictions/delete', 'controller': 'PredictionController', 'action': 'delete', 'method': 'POST', 'name': 'api.predictions.delete'},
            {'path': '/predictions/get', 'controller': 'PredictionController', 'action': 'apiGetPrediction', 'method': 'GET', 'name': 'api.predictions.get'},
            {'path': '/search', 'controller': 'ApiController', 'action': 'search', 'method': 'GET', 'name': 'api.search'},
            {'path': '/search_stocks', 'controller': 'ApiController', 'action': 'searchStocks', 'method': 'GET', 'name': 'api.search_stocks'},
            {'path': '/stocks', 'controller': 'ApiController', 'action': 'stocks', 'method': 'GET', 'name': 'api.stocks'},
            {'path': '/stocks/{symbol}', 'controller': 'ApiController', 'action': 'getStock', 'method': 'GET', 'name': 'api.stocks.get'},
            {'path': '/stocks/{symbol}/price', 'controller': 'ApiController', 'action': 'getStockPrice', 'method': 'GET', 'name': 'api.stocks.price'},
        ],
    },

    # Admin routes
    {
        'type': 'group',
        'name': 'admin',
        'prefix': '/admin',
        'middleware': ['auth', 'admin'],
        'namespace': 'Admin',
        'routes': [
            {'path': '/', 'controller': 'DashboardController', 'action': 'index', 'method': 'GET', 'name': 'admin.dashboard'},
            {'path': '/users', 'controller': 'UserController', 'action': 'index', 'method': 'GET', 'name': 'admin.users.index'},
            {'path': '/users/{id}', 'controller': 'UserController', 'action': 'view', 'method': 'GET', 'name': 'admin.users.view'},
        ],
    },

    # Error pages
    {'404': {'controller': 'ErrorController', 'action': 'notFound'}},
    {'403': {'controller': 'ErrorController', 'action': 'forbidden'}},
    {'500': {'controller': 'ErrorController', 'action': 'serverError'}},
]
