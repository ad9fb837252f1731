"""GraphQL operation documents issued by this library."""

LOGIN_MUTATION = """
mutation Login($emailOrUsername: String!, $password: String!) {
  login(emailOrUsername: $emailOrUsername, password: $password) {
    token
  }
}
"""

GET_POSTS_QUERY = """
query GetPosts($first: Int, $after: String) {
  posts(first: $first, after: $after) {
    edges {
      cursor
      node {
        id
        postContent {
          name
          summary
          htmlBody
        }
      }
    }
    pageInfo {
      hasNextPage
      endCursor
    }
  }
}
"""
